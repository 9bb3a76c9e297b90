"""Feature extractor implementations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from ..errors import ensure_positive
from ..global_config import FRAME_LENGTH, NUM_COEFFICIENTS


@runtime_checkable
class FeatureExtractor(Protocol):
    """Maps one analysis frame to a fixed-length coefficient vector."""

    num_coefficients: int

    def extract(self, frame_index: int, frame: np.ndarray) -> np.ndarray:
        ...


class PlaceholderCepstrum:
    """Deterministic stand-in for a cepstral feature.

    Coefficient j of frame i is sin(i + j) scaled by the frame's peak-to-peak
    amplitude, so a constant frame contributes exact zeros.
    """

    def __init__(self, num_coefficients: int = NUM_COEFFICIENTS) -> None:
        ensure_positive(num_coefficients, "num_coefficients")
        self.num_coefficients = int(num_coefficients)

    def extract(self, frame_index: int, frame: np.ndarray) -> np.ndarray:
        j = np.arange(self.num_coefficients, dtype=np.float64)
        return np.sin(frame_index + j) * float(np.ptp(frame))


def frame_waveform(samples, frame_length: int = FRAME_LENGTH) -> np.ndarray:
    """Split samples into non-overlapping frames; a trailing partial frame is dropped.

    Returns a (num_frames, frame_length) float64 array.
    """
    ensure_positive(frame_length, "frame_length")
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {x.shape}")
    num_frames = x.size // frame_length
    return x[: num_frames * frame_length].reshape(num_frames, frame_length)


def extract_features(
    samples,
    extractor: FeatureExtractor | None = None,
    frame_length: int = FRAME_LENGTH,
) -> np.ndarray:
    """Frame the signal and apply extractor to each frame.

    Parameters
    ----------
    samples : array-like
        1-D amplitude samples.
    extractor : FeatureExtractor or None
        Frame -> coefficients capability (default PlaceholderCepstrum()).
    frame_length : int
        Samples per frame (default 400).

    Returns
    -------
    np.ndarray
        FeatureMatrix of shape (num_frames, extractor.num_coefficients).
    """
    if extractor is None:
        extractor = PlaceholderCepstrum()
    frames = frame_waveform(samples, frame_length)
    C = extractor.num_coefficients
    features = np.empty((frames.shape[0], C), dtype=np.float64)
    for i, frame in enumerate(frames):
        coeffs = np.asarray(extractor.extract(i, frame), dtype=np.float64)
        if coeffs.shape != (C,):
            raise ValueError(
                f"Extractor returned shape {coeffs.shape} for frame {i}, expected ({C},)"
            )
        features[i] = coeffs
    if not np.all(np.isfinite(features)):
        raise ValueError("Extracted features contain non-finite values")
    return features
