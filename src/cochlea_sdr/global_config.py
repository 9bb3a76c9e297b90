"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared filesystem anchors and cross-cutting encoding constants that many
modules can import.

Per-run encoding parameters are bundled in `cochlea_sdr.config`, which
builds on top of these constants.
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
# PROJECT_ROOT is the repo root (where pyproject.toml and data/ live)
# From src/cochlea_sdr/global_config.py, go up two levels: src/cochlea_sdr -> src -> repo root
PROJECT_ROOT: Path = PACKAGE_ROOT.parent.parent

# Core Names
PROJECT_NAME = "cochlea-sdr"
PACKAGE_NAME = "cochlea_sdr"


# Data directories
DATA_DIR: Path = PROJECT_ROOT / "data"
RAW_AUDIO_DIR: Path = DATA_DIR / "raw" / "audio"
DERIVED_DIR: Path = DATA_DIR / "derived"
SDR_OUTPUT_DIR: Path = DERIVED_DIR / "sdr"
NEUROGRAM_OUTPUT_DIR: Path = DERIVED_DIR / "neurogram"

# Logs directories
LOGS_DIR: Path = PROJECT_ROOT / "logs"
DERIVED_LOGS_DIR: Path = LOGS_DIR / "derived"


# Resampling
TARGET_SAMPLE_RATE: int = 100_000  # Hz

# Feature extraction
FRAME_LENGTH: int = 400  # samples per non-overlapping frame
NUM_COEFFICIENTS: int = 16

# Scalar encoding
SDR_WIDTH: int = 512  # bits per coefficient SDR
ACTIVE_WIDTH: int = 21  # nominal w; the band is always 21 bits wide
BAND_HALF_WIDTH: int = 10
RESOLUTION_FLOOR: float = 0.001
RESOLUTION_BUCKETS: int = 1024

# Neurogram
CHANNEL_COUNT: int = 1024
PCM_FULL_SCALE: float = float(2**15)

# Output naming
SDR_SUFFIX = ".sdr.txt"
NEUROGRAM_SUFFIX = "_neurogram.npy"
