"""Scalar, frame and neurogram encoders."""

from .cochlea import CochleaEncoder
from .frames import assemble_frame_sdrs, derive_resolution
from .scalar import ScalarEncoder

__all__ = [
    "CochleaEncoder",
    "ScalarEncoder",
    "assemble_frame_sdrs",
    "derive_resolution",
]
