"""Assemble per-frame SDRs from a normalized feature matrix."""

from __future__ import annotations

import logging

import numpy as np

from ..errors import ensure_positive
from ..global_config import ACTIVE_WIDTH, RESOLUTION_BUCKETS, RESOLUTION_FLOOR, SDR_WIDTH
from .scalar import ScalarEncoder

logger = logging.getLogger(__name__)


def derive_resolution(
    features: np.ndarray,
    floor: float = RESOLUTION_FLOOR,
    buckets: int = RESOLUTION_BUCKETS,
) -> float:
    """Return max(floor, (max - min) / buckets) over the whole matrix."""
    ensure_positive(floor, "floor")
    ensure_positive(buckets, "buckets")
    if features.size == 0:
        return float(floor)
    span = float(np.max(features) - np.min(features))
    return max(float(floor), span / buckets)


def assemble_frame_sdrs(
    features: np.ndarray,
    n: int = SDR_WIDTH,
    w: int = ACTIVE_WIDTH,
    resolution: float | None = None,
    offset: float | None = None,
    resolution_floor: float = RESOLUTION_FLOOR,
    resolution_buckets: int = RESOLUTION_BUCKETS,
) -> np.ndarray:
    """Encode every coefficient of every frame and concatenate per frame.

    Parameters
    ----------
    features : np.ndarray
        FeatureMatrix of shape (num_frames, C), normally already z-scored.
    n : int
        Bits per coefficient SDR (default 512).
    w : int
        Nominal active width forwarded to the encoder (default 21).
    resolution : float or None
        Encoder resolution; derived from the matrix range when None.
    offset : float or None
        Encoder offset; the mean of the matrix as given when None.
    resolution_floor : float
        Lower bound used when deriving resolution (default 0.001).
    resolution_buckets : int
        Divisor of the value range used when deriving resolution (default 1024).

    Returns
    -------
    np.ndarray
        uint8 array of shape (num_frames, C * n). Row k is the FrameSDR of
        frame k; columns [j*n:(j+1)*n] hold coefficient j.
    """
    if features.ndim != 2:
        raise ValueError(f"features must be 2-D, got shape {features.shape}")
    num_frames, C = features.shape
    if resolution is None:
        resolution = derive_resolution(features, resolution_floor, resolution_buckets)
    if offset is None:
        offset = float(np.mean(features)) if features.size else 0.0

    encoder = ScalarEncoder(resolution=resolution, n=n, w=w, offset=offset)
    logger.debug(
        "Encoding %d frame(s) x %d coefficient(s): resolution=%.6g offset=%.6g n=%d",
        num_frames,
        C,
        resolution,
        offset,
        n,
    )

    sdrs = np.zeros((num_frames, C * n), dtype=np.uint8)
    for k in range(num_frames):
        row = sdrs[k]
        for j in range(C):
            encoder.encode_into(float(features[k, j]), row[j * n : (j + 1) * n])
    return sdrs
