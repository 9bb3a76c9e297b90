"""Pipeline for encoding raw audio into FrameSDR text files."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from ..audio import Waveform, load_waveform
from ..config import EncodingConfig
from ..encoders import assemble_frame_sdrs
from ..features import FeatureExtractor, extract_features, zscore_normalize
from ..global_config import RAW_AUDIO_DIR, SDR_OUTPUT_DIR
from ..resample import resample
from ..utils.sdr_io import sdr_output_path, write_sdr_text

logger = logging.getLogger(__name__)


def _resolve_audio_files(files: list[Path] | None, raw_audio_dir: Path) -> list[Path]:
    """Return list of audio paths: explicit files if given, else all .wav in raw_audio_dir."""
    if files:
        return [Path(p).resolve() for p in files]
    if not raw_audio_dir.exists():
        return []
    return sorted(raw_audio_dir.glob("*.wav"))


def encode_waveform(
    waveform: Waveform,
    config: EncodingConfig | None = None,
    extractor: FeatureExtractor | None = None,
) -> np.ndarray:
    """Resample, extract, normalize and encode one waveform.

    Returns the uint8 FrameSDR array of shape (num_frames, C * sdr_width).
    Degenerate features raise before any encoding happens.
    """
    config = config or EncodingConfig()
    if waveform.sample_rate != config.target_rate:
        waveform = resample(waveform, config.target_rate)
    features = extract_features(waveform.samples, extractor, config.frame_length)
    mean, std = zscore_normalize(features)
    logger.debug("Normalized %s features (mean=%.6g, std=%.6g)", features.shape, mean, std)
    return assemble_frame_sdrs(
        features,
        n=config.sdr_width,
        w=config.active_width,
        resolution_floor=config.resolution_floor,
        resolution_buckets=config.resolution_buckets,
    )


def run_sdr(
    *,
    audio_files: list[Path] | None = None,
    output_dir: Path = SDR_OUTPUT_DIR,
    raw_audio_dir: Path = RAW_AUDIO_DIR,
    config: EncodingConfig | None = None,
    extractor: FeatureExtractor | None = None,
    overwrite: bool = False,
    dry_run: bool = False,
) -> dict:
    """Encode audio file(s) to <stem>.sdr.txt in output_dir.

    If audio_files is None or empty, uses all .wav files in raw_audio_dir.
    Existing outputs are skipped unless overwrite is True. A failure on one
    file is recorded and leaves no output for it; the batch continues.

    Returns:
        Dict with success, total, succeeded, failed, skipped, message, items, failures.
    """
    config = config or EncodingConfig()
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
        out_path = sdr_output_path(audio_path, output_dir)

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
            sdrs = encode_waveform(waveform, config, extractor)
            if not dry_run:
                write_sdr_text(out_path, sdrs)
            succeeded += 1
            items.append({
                "file": audio_path.name,
                "output": out_path.name,
                "status": "success",
                "kind": "sdr",
                "input_sample_rate_hz": waveform.sample_rate,
                "num_frames": int(sdrs.shape[0]),
                "sdr_bits": int(sdrs.shape[1]),
                "active_bits": int(sdrs[0].sum()) if sdrs.shape[0] else 0,
            })
        except Exception as e:
            logger.warning("SDR encoding failed for %s: %s", audio_path, e)
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
