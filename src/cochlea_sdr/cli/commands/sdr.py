"""CLI command for encoding audio into FrameSDR text files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config import EncodingConfig
from ...global_config import (
    FRAME_LENGTH,
    RAW_AUDIO_DIR,
    RESOLUTION_FLOOR,
    SDR_OUTPUT_DIR,
    SDR_WIDTH,
    TARGET_SAMPLE_RATE,
)
from ...pipeline.sdr import run_sdr
from ..base import BaseCLI

app = typer.Typer(
    name="sdr",
    help="Encode raw audio into SDR text files (one line per frame) in data/derived/sdr",
)


@app.callback(invoke_without_command=True)
def sdr(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="Audio file(s) to process. If omitted, all .wav files in data/raw/audio are used.",
        ),
    ] = [],
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for <stem>.sdr.txt outputs."),
    ] = SDR_OUTPUT_DIR,
    target_rate: Annotated[
        float,
        typer.Option("--target-rate", "-r", help=f"Resample to this rate in Hz. Default: {TARGET_SAMPLE_RATE}."),
    ] = TARGET_SAMPLE_RATE,
    frame_length: Annotated[
        int,
        typer.Option("--frame-length", "-L", help=f"Samples per frame. Default: {FRAME_LENGTH}."),
    ] = FRAME_LENGTH,
    width: Annotated[
        int,
        typer.Option("--width", "-n", help=f"Bits per coefficient SDR. Default: {SDR_WIDTH}."),
    ] = SDR_WIDTH,
    resolution_floor: Annotated[
        float,
        typer.Option("--resolution-floor", help=f"Minimum encoder resolution. Default: {RESOLUTION_FLOOR}."),
    ] = RESOLUTION_FLOOR,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Re-encode files whose output already exists."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Encode without writing files."),
    ] = False,
    no_log: Annotated[
        bool,
        typer.Option("--no-log", help="Do not write a log file to logs/derived."),
    ] = False,
) -> None:
    """Encode raw audio into SDR text files.

    Each file is resampled, split into frames, normalized and encoded; the
    output holds one '0'/'1' line per frame. Existing outputs are skipped
    unless --overwrite is given.
    """
    cli = BaseCLI("sdr")

    audio_list = list(files) if files else None

    def _run() -> dict:
        config = EncodingConfig(
            target_rate=target_rate,
            frame_length=frame_length,
            sdr_width=width,
            resolution_floor=resolution_floor,
        )
        return run_sdr(
            audio_files=audio_list,
            output_dir=output_dir,
            raw_audio_dir=RAW_AUDIO_DIR,
            config=config,
            overwrite=overwrite,
            dry_run=dry_run,
        )

    pre_message = (
        "Encoding SDRs (dry-run; no files will be written)..."
        if dry_run
        else "Encoding SDRs for "
        + (f"{len(audio_list)} file(s)..." if audio_list else "all audio in raw folder...")
    )
    inputs_desc = (
        str([str(p) for p in audio_list]) if audio_list
        else f"all .wav in {RAW_AUDIO_DIR}"
    )
    cli.handle_cli_operation(
        operation="sdr",
        op_callable=_run,
        pre_message=pre_message,
        log_module="sdr",
        log_dry_run=dry_run,
        enable_log=not no_log,
        log_context={
            "inputs": inputs_desc,
            "output_dir": str(output_dir),
            "target_rate": target_rate,
            "width": width,
        },
    )
