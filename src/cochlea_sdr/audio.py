"""Waveform container and audio decoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import librosa
import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waveform:
    """Mono amplitude samples with their sample rate.

    Attributes:
        samples: 1-D float64 array of amplitudes.
        sample_rate: Sample rate in Hz.
    """

    samples: np.ndarray
    sample_rate: float


def load_waveform(audio_path: Path) -> Waveform:
    """Decode an audio file into a mono Waveform at its native sample rate.

    Decode errors from librosa/soundfile propagate unchanged.
    """
    y, sr = librosa.load(audio_path, sr=None, mono=True)
    logger.debug("Loaded %s: %d samples @ %s Hz", audio_path, len(y), sr)
    return Waveform(samples=np.asarray(y, dtype=np.float64), sample_rate=float(sr))
