"""Pipeline orchestration layer.

Pipeline modules are organized by output kind:
- `pipeline/sdr.py` - audio -> FrameSDR text files
- `pipeline/neurogram.py` - audio -> neurogram .npy files

Import policy:
- CLI imports only from `pipeline.*` for orchestration.
- `pipeline.*` may call the core packages (`resample`, `features`, `encoders`)
  and `utils.*` as helpers.
- Core packages must not call `pipeline.*`.
"""
