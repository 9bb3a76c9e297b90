"""CLI command for neurogram thresholding."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...global_config import NEUROGRAM_OUTPUT_DIR, RAW_AUDIO_DIR
from ...pipeline.neurogram import run_neurogram
from ..base import BaseCLI

app = typer.Typer(
    name="neurogram",
    help="Threshold raw audio into 1024-channel neurograms in data/derived/neurogram",
)


@app.callback(invoke_without_command=True)
def neurogram(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="Audio file(s) to process. If omitted, all .wav files in data/raw/audio are used.",
        ),
    ] = [],
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for <stem>_neurogram.npy outputs."),
    ] = NEUROGRAM_OUTPUT_DIR,
    normalize: Annotated[
        bool,
        typer.Option("--normalize/--no-normalize", help="Divide samples by 2**15 before thresholding."),
    ] = False,
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
    """Threshold raw audio into binary (channel, time) neurograms saved as .npy."""
    cli = BaseCLI("neurogram")

    audio_list = list(files) if files else None

    def _run() -> dict:
        return run_neurogram(
            audio_files=audio_list,
            output_dir=output_dir,
            raw_audio_dir=RAW_AUDIO_DIR,
            normalize_input=normalize,
            overwrite=overwrite,
            dry_run=dry_run,
        )

    pre_message = (
        "Encoding neurograms (dry-run; no files will be written)..."
        if dry_run
        else "Encoding neurograms for "
        + (f"{len(audio_list)} file(s)..." if audio_list else "all audio in raw folder...")
    )
    cli.handle_cli_operation(
        operation="neurogram",
        op_callable=_run,
        pre_message=pre_message,
        log_module="neurogram",
        log_dry_run=dry_run,
        enable_log=not no_log,
        log_context={"output_dir": str(output_dir), "normalize": normalize},
    )
