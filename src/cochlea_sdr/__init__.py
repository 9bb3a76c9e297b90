"""
cochlea_sdr core package.

Converts audio waveforms into sparse distributed representations:
- `resample` - cubic-spline resampling to the target rate
- `features` - framing, pluggable per-frame feature extraction, z-score normalization
- `encoders` - scalar SDR encoder, frame assembly and the neurogram thresholder
- `pipeline` - batch drivers writing derived outputs
- A Typer-based CLI (`cochlea_sdr.cli`)

Configuration:
- Shared filesystem anchors and encoding constants live in `cochlea_sdr.global_config`.
- Per-run parameters are bundled by `cochlea_sdr.config.EncodingConfig`.
"""
