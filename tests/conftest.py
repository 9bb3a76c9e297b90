from __future__ import annotations

import wave
from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Forces test mode. Application code can use this to refuse dangerous behaviors.
    Automatically applied to all tests.
    """
    monkeypatch.setenv("APP_ENV", "test")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    A dedicated temp root directory for each test.
    All filesystem writes in tests should be under this root (or tmp_path directly).
    """
    root = tmp_path / "proj"
    (root / "data" / "in").mkdir(parents=True)
    (root / "data" / "out").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def chdir_to_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Automatically change working directory to project_root for all tests.
    This ensures relative-path operations go into the temp directory by default.
    """
    monkeypatch.chdir(project_root)


def _write_pcm16_wav(path: Path, samples: np.ndarray, sr: int) -> Path:
    """Write a mono 16-bit PCM WAV from int16 samples so librosa can load it."""
    buf = np.asarray(samples, dtype=np.int16)
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(sr)
        w.writeframes(buf.tobytes())
    return path


@pytest.fixture
def write_wav() -> Callable[..., Path]:
    """Factory writing int16 WAV files: write_wav(path, samples, sr)."""
    return _write_pcm16_wav


@pytest.fixture
def tone_samples() -> Callable[[int, int], np.ndarray]:
    """Factory for int16 sine samples with a slow amplitude envelope: tone_samples(n, sr)."""

    def _make(n: int, sr: int) -> np.ndarray:
        t = np.arange(n) / sr
        envelope = 0.3 + 0.6 * np.abs(np.sin(2 * np.pi * 3.0 * t))
        return (envelope * np.sin(2 * np.pi * 440.0 * t) * 20000).astype(np.int16)

    return _make
