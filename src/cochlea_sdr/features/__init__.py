"""Frame-level feature extraction package."""

from .methods import (
    FeatureExtractor,
    PlaceholderCepstrum,
    extract_features,
    frame_waveform,
)
from .normalize import zscore_normalize

__all__ = [
    "FeatureExtractor",
    "PlaceholderCepstrum",
    "extract_features",
    "frame_waveform",
    "zscore_normalize",
]
