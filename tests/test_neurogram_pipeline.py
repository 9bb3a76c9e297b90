"""Tests for the neurogram pipeline."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from cochlea_sdr.pipeline.neurogram import run_neurogram


class TestRunNeurogram:
    """Integration-style tests for run_neurogram (tmp paths)."""

    def test_writes_thresholded_grid(self, tmp_path: Path, write_wav) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "neurogram"
        samples = np.tile(np.array([1000, -1000, 0, 5], dtype=np.int16), 700)
        wav = write_wav(wav_dir / "click.wav", samples, 16_000)

        result = run_neurogram(audio_files=[wav], output_dir=out_dir)

        assert result["success"] is True
        item = result["items"][0]
        assert item["output"] == "click_neurogram.npy"
        assert item["shape"] == (1024, 2)
        grid = np.load(out_dir / "click_neurogram.npy")
        assert grid.shape == (1024, 2800 // 1024)
        assert grid.dtype == np.uint8
        # channel cf sees sample t*1024 + cf; pattern period 4 divides 1024
        expected_channel = (np.array([1000, -1000, 0, 5]) > 0).astype(np.uint8)
        np.testing.assert_array_equal(grid[:4, 0], expected_channel)
        np.testing.assert_array_equal(grid[:, 0], grid[:, 1])

    def test_short_audio_gives_zero_time_steps(self, tmp_path: Path, write_wav) -> None:
        wav = write_wav(tmp_path / "short.wav", np.ones(500, dtype=np.int16), 8000)
        out_dir = tmp_path / "neurogram"
        result = run_neurogram(audio_files=[wav], output_dir=out_dir, normalize_input=True)
        assert result["success"] is True
        assert np.load(out_dir / "short_neurogram.npy").shape == (1024, 0)

    def test_skip_existing(self, tmp_path: Path, write_wav) -> None:
        wav = write_wav(tmp_path / "s.wav", np.ones(2048, dtype=np.int16), 8000)
        out_dir = tmp_path / "neurogram"
        out_dir.mkdir()
        np.save(out_dir / "s_neurogram.npy", np.zeros(1))
        result = run_neurogram(audio_files=[wav], output_dir=out_dir)
        assert result["skipped"] == 1
        assert np.load(out_dir / "s_neurogram.npy").shape == (1,)

    def test_undecodable_file_fails_without_output(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.wav"
        bad.write_bytes(b"not audio at all")
        out_dir = tmp_path / "neurogram"
        result = run_neurogram(audio_files=[bad], output_dir=out_dir)
        assert result["success"] is False
        assert result["failed"] == 1
        assert not (out_dir / "bad_neurogram.npy").exists()

    def test_dry_run_writes_nothing(self, tmp_path: Path, write_wav) -> None:
        wav = write_wav(tmp_path / "d.wav", np.ones(2048, dtype=np.int16), 8000)
        out_dir = tmp_path / "neurogram"
        result = run_neurogram(audio_files=[wav], output_dir=out_dir, dry_run=True)
        assert result["succeeded"] == 1
        assert not out_dir.exists()
