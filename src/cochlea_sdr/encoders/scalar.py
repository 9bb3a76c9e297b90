"""Scalar -> SDR encoding with a contiguous circular active band."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..errors import ensure_positive
from ..global_config import ACTIVE_WIDTH, BAND_HALF_WIDTH

_BAND = np.arange(-BAND_HALF_WIDTH, BAND_HALF_WIDTH + 1)


@dataclass(frozen=True)
class ScalarEncoder:
    """Encode a scalar as n bits with a 21-bit circular band centred on its bucket.

    The bucket is floor((value - offset) / resolution); every bit in
    [bucket - 10, bucket + 10] modulo n is set. For n < 21 the band wraps onto
    itself and all n bits end up set.

    Attributes:
        resolution: Input distance that moves the band by one bit.
        n: Output width in bits.
        w: Nominal active width. Accepted for compatibility; the band is
            always 2 * BAND_HALF_WIDTH + 1 bits wide.
        offset: Value mapped to bucket 0.
    """

    resolution: float
    n: int
    w: int = ACTIVE_WIDTH
    offset: float = 0.0

    def __post_init__(self) -> None:
        ensure_positive(self.resolution, "resolution")
        ensure_positive(self.n, "n")

    @property
    def output_width(self) -> int:
        return self.n

    @property
    def active_bits(self) -> int:
        """Number of distinct bits set by every encode."""
        return min(len(_BAND), self.n)

    def bucket(self, value: float) -> int:
        """Return the band centre for value (before wrapping)."""
        if not math.isfinite(value):
            raise ValueError(f"Cannot encode non-finite value {value!r}")
        return math.floor((value - self.offset) / self.resolution)

    def encode_into(self, value: float, output: np.ndarray) -> None:
        """Clear output and write the SDR for value into it.

        Args:
            value: Finite scalar to encode.
            output: Caller-owned 1-D buffer of length n. Mutated in place.

        Raises:
            ValueError: If output has the wrong shape or value is not finite.
        """
        if output.shape != (self.n,):
            raise ValueError(f"output must have shape ({self.n},), got {output.shape}")
        centre = self.bucket(value) % self.n
        output[:] = 0
        output[(centre + _BAND) % self.n] = 1

    def encode(self, value: float) -> np.ndarray:
        """Return a fresh uint8 SDR of length n for value."""
        sdr = np.zeros(self.n, dtype=np.uint8)
        self.encode_into(value, sdr)
        return sdr
