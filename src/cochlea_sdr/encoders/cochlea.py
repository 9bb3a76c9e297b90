"""Direct amplitude -> neurogram thresholding."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..errors import ensure_positive
from ..global_config import CHANNEL_COUNT, PCM_FULL_SCALE


@dataclass(frozen=True)
class CochleaEncoder:
    """Reshape a waveform into a binary (channel, time) grid.

    Sample t * channels + cf lands in cell [cf, t]; a cell is 1 when its value
    is strictly positive. Trailing samples that do not fill a whole time
    column are dropped.

    Attributes:
        normalize_input: Divide samples by 2**15 (16-bit PCM full scale) first.
        channels: Number of channels W (default 1024).
    """

    normalize_input: bool = True
    channels: int = CHANNEL_COUNT

    def __post_init__(self) -> None:
        ensure_positive(self.channels, "channels")

    @property
    def output_width(self) -> int:
        return self.channels

    def time_steps(self, num_samples: int) -> int:
        return num_samples // self.channels

    def encode(self, samples) -> np.ndarray:
        """Return a uint8 neurogram of shape (channels, len(samples) // channels).

        The caller's samples are never modified.
        """
        x = np.asarray(samples, dtype=np.float64)
        if x.ndim != 1:
            raise ValueError(f"samples must be 1-D, got shape {x.shape}")
        if self.normalize_input:
            x = x / PCM_FULL_SCALE
        T = self.time_steps(x.size)
        grid = x[: T * self.channels].reshape(T, self.channels).T
        return (grid > 0).astype(np.uint8)
