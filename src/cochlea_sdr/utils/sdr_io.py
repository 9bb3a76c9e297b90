"""Read and write FrameSDR text files and neurogram arrays.

SDR text format: one line per frame, one '0'/'1' character per bit in index
order, newline-terminated, no header.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from ..global_config import NEUROGRAM_SUFFIX, SDR_SUFFIX

logger = logging.getLogger(__name__)

_BIT_CHARS = np.array([ord("0"), ord("1")], dtype=np.uint8)


def sdr_output_path(audio_path: Path, output_dir: Path) -> Path:
    """Return <output_dir>/<stem>.sdr.txt for an audio file."""
    return Path(output_dir) / f"{Path(audio_path).stem}{SDR_SUFFIX}"


def neurogram_output_path(audio_path: Path, output_dir: Path) -> Path:
    """Return <output_dir>/<stem>_neurogram.npy for an audio file."""
    return Path(output_dir) / f"{Path(audio_path).stem}{NEUROGRAM_SUFFIX}"


def _tmp_sibling(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp")


def format_sdr_lines(frame_sdrs: np.ndarray) -> str:
    """Render a (num_frames, bits) 0/1 array as newline-terminated lines."""
    if frame_sdrs.ndim != 2:
        raise ValueError(f"frame_sdrs must be 2-D, got shape {frame_sdrs.shape}")
    if frame_sdrs.size and not np.isin(frame_sdrs, (0, 1)).all():
        raise ValueError("frame_sdrs must contain only 0 and 1")
    chars = _BIT_CHARS[frame_sdrs.astype(np.intp)]
    return "".join(row.tobytes().decode("ascii") + "\n" for row in chars)


def write_sdr_text(path: Path, frame_sdrs: np.ndarray) -> Path:
    """Write frame SDRs to path via a temporary sibling renamed into place.

    Returns:
        The written path.
    """
    path = Path(path)
    text = format_sdr_lines(frame_sdrs)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = _tmp_sibling(path)
    try:
        tmp.write_text(text, encoding="ascii")
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)
    logger.info("Wrote %d SDR line(s) to %s", frame_sdrs.shape[0], path)
    return path


def read_sdr_text(path: Path) -> np.ndarray:
    """Parse an SDR text file back into a uint8 (num_frames, bits) array.

    Raises:
        ValueError: If lines differ in length or contain characters other than 0/1.
    """
    lines = Path(path).read_text(encoding="ascii").splitlines()
    if not lines:
        return np.zeros((0, 0), dtype=np.uint8)
    width = len(lines[0])
    for i, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Line {i} has length {len(line)}, expected {width}")
        if line.strip("01"):
            raise ValueError(f"Line {i} contains characters other than '0'/'1'")
    raw = np.frombuffer("".join(lines).encode("ascii"), dtype=np.uint8)
    return (raw - ord("0")).reshape(len(lines), width)


def write_neurogram(path: Path, neurogram: np.ndarray) -> Path:
    """Save a neurogram as .npy via a temporary sibling renamed into place."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = _tmp_sibling(path)
    try:
        with open(tmp, "wb") as f:
            np.save(f, neurogram, allow_pickle=False)
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)
    logger.info("Wrote neurogram %s to %s", neurogram.shape, path)
    return path
