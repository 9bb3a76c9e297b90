"""Pipeline for thresholding raw audio into neurogram .npy files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..audio import load_waveform
from ..encoders import CochleaEncoder
from ..global_config import CHANNEL_COUNT, NEUROGRAM_OUTPUT_DIR, RAW_AUDIO_DIR
from ..utils.sdr_io import neurogram_output_path, write_neurogram

logger = logging.getLogger(__name__)


def _resolve_audio_files(files: list[Path] | None, raw_audio_dir: Path) -> list[Path]:
    """Return list of audio paths: explicit files if given, else all .wav in raw_audio_dir."""
    if files:
        return [Path(p).resolve() for p in files]
    if not raw_audio_dir.exists():
        return []
    return sorted(raw_audio_dir.glob("*.wav"))


def run_neurogram(
    *,
    audio_files: list[Path] | None = None,
    output_dir: Path = NEUROGRAM_OUTPUT_DIR,
    raw_audio_dir: Path = RAW_AUDIO_DIR,
    normalize_input: bool = False,
    channels: int = CHANNEL_COUNT,
    overwrite: bool = False,
    dry_run: bool = False,
) -> dict:
    """Encode audio file(s) to <stem>_neurogram.npy in output_dir.

    Samples are taken at the file's native rate; no resampling is applied.
    Existing outputs are skipped unless overwrite is True.
    """
    encoder = CochleaEncoder(normalize_input=normalize_input, channels=channels)
    paths = _resolve_audio_files(audio_files, raw_audio_dir)
    if not paths:
        return {
            "success": True,
            "total": 0,
            "succeeded": 0,
            "failed": 0,
            "skipped": 0,
            "message": "No audio files to process.",
            "items": [],
            "failures": [],
        }

    output_dir = Path(output_dir)
    if not dry_run:
        output_dir.mkdir(parents=True, exist_ok=True)

    succeeded = 0
    failed = 0
    skipped = 0
    items: list[dict] = []
    failures: list[dict] = []

    for audio_path in paths:
        out_path = neurogram_output_path(audio_path, output_dir)

        if out_path.exists() and not overwrite:
            skipped += 1
            items.append({
                "file": audio_path.name,
                "status": "skipped",
                "detail": f"Output exists: {out_path.name}",
            })
            continue

        if not audio_path.exists():
            failed += 1
            failures.append({"item": str(audio_path), "reason": "File not found"})
            items.append({"file": audio_path.name, "status": "failed", "detail": "File not found"})
            continue

        try:
            waveform = load_waveform(audio_path)
            grid = encoder.encode(waveform.samples)
            if not dry_run:
                write_neurogram(out_path, grid)
            succeeded += 1
            items.append({
                "file": audio_path.name,
                "output": out_path.name,
                "status": "success",
                "kind": "neurogram",
                "shape": tuple(grid.shape),
                "active_fraction": float(grid.mean()) if grid.size else 0.0,
            })
        except Exception as e:
            logger.warning("Neurogram encoding failed for %s: %s", audio_path, e)
            failed += 1
            failures.append({"item": str(audio_path), "reason": str(e)})
            items.append({"file": audio_path.name, "status": "failed", "detail": str(e)})

    return {
        "success": failed == 0,
        "total": len(paths),
        "succeeded": succeeded,
        "failed": failed,
        "skipped": skipped,
        "message": f"Processed {len(paths)} file(s). Succeeded: {succeeded}, failed: {failed}, skipped: {skipped}."
        + (" [DRY RUN]" if dry_run else ""),
        "items": items,
        "failures": failures,
    }
