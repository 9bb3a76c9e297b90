"""Per-run encoding parameters, built on top of `cochlea_sdr.global_config`."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ensure_positive
from .global_config import (
    ACTIVE_WIDTH,
    FRAME_LENGTH,
    RESOLUTION_BUCKETS,
    RESOLUTION_FLOOR,
    SDR_WIDTH,
    TARGET_SAMPLE_RATE,
)


@dataclass(frozen=True)
class EncodingConfig:
    """Parameters for one waveform -> FrameSDR run.

    Attributes:
        target_rate: Sample rate (Hz) the waveform is resampled to before framing.
        frame_length: Samples per non-overlapping analysis frame.
        sdr_width: Output bits per coefficient SDR (n).
        active_width: Nominal active width (w). Stored, not used by the encoder.
        resolution_floor: Lower bound for the derived encoder resolution.
        resolution_buckets: Divisor applied to the feature range to derive resolution.
    """

    target_rate: float = TARGET_SAMPLE_RATE
    frame_length: int = FRAME_LENGTH
    sdr_width: int = SDR_WIDTH
    active_width: int = ACTIVE_WIDTH
    resolution_floor: float = RESOLUTION_FLOOR
    resolution_buckets: int = RESOLUTION_BUCKETS

    def __post_init__(self) -> None:
        ensure_positive(self.target_rate, "target_rate")
        ensure_positive(self.frame_length, "frame_length")
        ensure_positive(self.sdr_width, "sdr_width")
        ensure_positive(self.resolution_floor, "resolution_floor")
        ensure_positive(self.resolution_buckets, "resolution_buckets")
