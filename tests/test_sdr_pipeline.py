"""Tests for the SDR pipeline and end-to-end encoding."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from cochlea_sdr.audio import Waveform, load_waveform
from cochlea_sdr.config import EncodingConfig
from cochlea_sdr.errors import DegenerateStatisticsError, InvalidConfigurationError
from cochlea_sdr.pipeline.sdr import _resolve_audio_files, encode_waveform, run_sdr


class TestSdrHelpers:
    """Unit tests for pipeline helpers."""

    def test_resolve_audio_files_explicit(self, tmp_path: Path) -> None:
        a = tmp_path / "a.wav"
        a.touch()
        got = _resolve_audio_files([a], tmp_path)
        assert [p.name for p in got] == ["a.wav"]

    def test_resolve_audio_files_default_folder(self, tmp_path: Path) -> None:
        audio = tmp_path / "audio"
        audio.mkdir()
        (audio / "two.wav").touch()
        (audio / "one.wav").touch()
        (audio / "notes.txt").touch()
        got = _resolve_audio_files(None, audio)
        assert [p.name for p in got] == ["one.wav", "two.wav"]

    def test_resolve_audio_files_nonexistent_folder(self, tmp_path: Path) -> None:
        assert _resolve_audio_files(None, tmp_path / "missing") == []

    def test_config_validation(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            EncodingConfig(sdr_width=0)
        with pytest.raises(InvalidConfigurationError):
            EncodingConfig(target_rate=-1)


class TestEncodeWaveform:
    """Core pipeline without file I/O."""

    def test_scenario_40000_samples_at_target_rate(self, tone_samples) -> None:
        samples = tone_samples(40_000, 100_000).astype(np.float64) / 32768.0
        waveform = Waveform(samples=samples, sample_rate=100_000.0)
        sdrs = encode_waveform(waveform, EncodingConfig(sdr_width=512))
        assert sdrs.shape == (100, 8192)
        np.testing.assert_array_equal(sdrs.sum(axis=1), np.full(100, 336))

    def test_resamples_to_target_rate(self, tone_samples) -> None:
        samples = tone_samples(3200, 8000).astype(np.float64)
        waveform = Waveform(samples=samples, sample_rate=8000.0)
        sdrs = encode_waveform(waveform)
        # 3200 samples @ 8 kHz -> 40000 @ 100 kHz -> 100 frames of 400
        assert sdrs.shape == (100, 16 * 512)

    def test_constant_waveform_is_degenerate(self) -> None:
        waveform = Waveform(samples=np.full(40_000, 0.3), sample_rate=100_000.0)
        with pytest.raises(DegenerateStatisticsError):
            encode_waveform(waveform)

    def test_too_short_waveform_is_degenerate(self) -> None:
        waveform = Waveform(samples=np.linspace(-1, 1, 399), sample_rate=100_000.0)
        with pytest.raises(DegenerateStatisticsError):
            encode_waveform(waveform)

    def test_deterministic(self, tone_samples) -> None:
        waveform = Waveform(samples=tone_samples(8000, 100_000).astype(float), sample_rate=100_000.0)
        np.testing.assert_array_equal(encode_waveform(waveform), encode_waveform(waveform))


class TestRunSdr:
    """Integration-style tests for run_sdr (tmp paths, real WAV decoding)."""

    def test_end_to_end_writes_100_lines(self, tmp_path: Path, write_wav, tone_samples) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "sdr"
        wav = write_wav(wav_dir / "0_george_1.wav", tone_samples(40_000, 100_000), 100_000)

        assert load_waveform(wav).sample_rate == 100_000.0

        result = run_sdr(audio_files=[wav], output_dir=out_dir, raw_audio_dir=wav_dir)

        assert result["success"] is True
        assert result["total"] == 1
        assert result["succeeded"] == 1
        item = result["items"][0]
        assert item["output"] == "0_george_1.sdr.txt"
        assert item["num_frames"] == 100
        assert item["sdr_bits"] == 8192
        assert item["active_bits"] == 336

        out_file = out_dir / "0_george_1.sdr.txt"
        text = out_file.read_text()
        assert text.endswith("\n")
        lines = text.splitlines()
        assert len(lines) == 100
        for line in lines:
            assert len(line) == 8192
            assert set(line) <= {"0", "1"}
            assert line.count("1") == 336

    def test_constant_waveform_fails_without_output(self, tmp_path: Path, write_wav) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "sdr"
        write_wav(wav_dir / "flat.wav", np.full(40_000, 1000, dtype=np.int16), 100_000)

        result = run_sdr(audio_files=None, output_dir=out_dir, raw_audio_dir=wav_dir)

        assert result["success"] is False
        assert result["failed"] == 1
        assert "variance" in result["failures"][0]["reason"]
        assert not (out_dir / "flat.sdr.txt").exists()

    def test_failure_is_isolated_per_file(self, tmp_path: Path, write_wav, tone_samples) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "sdr"
        write_wav(wav_dir / "a_flat.wav", np.zeros(8000, dtype=np.int16), 100_000)
        write_wav(wav_dir / "b_tone.wav", tone_samples(8000, 100_000), 100_000)

        result = run_sdr(output_dir=out_dir, raw_audio_dir=wav_dir)

        assert result["total"] == 2
        assert result["failed"] == 1
        assert result["succeeded"] == 1
        assert not (out_dir / "a_flat.sdr.txt").exists()
        assert (out_dir / "b_tone.sdr.txt").exists()

    def test_missing_file_is_reported(self, tmp_path: Path) -> None:
        result = run_sdr(audio_files=[tmp_path / "nope.wav"], output_dir=tmp_path / "sdr")
        assert result["failed"] == 1
        assert result["failures"][0]["reason"] == "File not found"

    def test_skip_existing_then_overwrite(self, tmp_path: Path, write_wav, tone_samples) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "sdr"
        out_dir.mkdir()
        wav = write_wav(wav_dir / "t.wav", tone_samples(4000, 100_000), 100_000)
        (out_dir / "t.sdr.txt").write_text("stale\n")

        skipped = run_sdr(audio_files=[wav], output_dir=out_dir)
        assert skipped["skipped"] == 1
        assert (out_dir / "t.sdr.txt").read_text() == "stale\n"

        redone = run_sdr(audio_files=[wav], output_dir=out_dir, overwrite=True)
        assert redone["succeeded"] == 1
        assert len((out_dir / "t.sdr.txt").read_text().splitlines()) == 10

    def test_dry_run_writes_nothing(self, tmp_path: Path, write_wav, tone_samples) -> None:
        wav = write_wav(tmp_path / "d.wav", tone_samples(4000, 100_000), 100_000)
        out_dir = tmp_path / "sdr"
        result = run_sdr(audio_files=[wav], output_dir=out_dir, dry_run=True)
        assert result["success"] is True
        assert result["succeeded"] == 1
        assert "[DRY RUN]" in result["message"]
        assert not out_dir.exists()

    def test_no_files(self, tmp_path: Path) -> None:
        result = run_sdr(raw_audio_dir=tmp_path / "empty", output_dir=tmp_path / "sdr")
        assert result["success"] is True
        assert result["total"] == 0
