import json
import math
from collections.abc import Mapping
from pathlib import Path

import numpy as np
from loguru import logger


def _to_json_compatible(value: object) -> object:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and not math.isfinite(value):
        # null would pass isNaN() filters as 0; strings keep their numeric meaning.
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, Mapping):
        return {str(k): _to_json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_compatible(v) for v in value]
    if isinstance(value, np.ndarray):
        return [_to_json_compatible(v) for v in value.tolist()]
    return value


def spec_to_json(spec: Mapping[str, object], indent: int | None = None) -> str:
    """
    Serialize a spec to JSON text for GenomeSpy.

    Non-finite floats become the strings ``"NaN"``, ``"Infinity"`` and
    ``"-Infinity"``, which GenomeSpy expressions coerce back to numbers, so
    ``isNaN`` filters keep dropping them. numpy values become plain JSON
    numbers and arrays.
    """
    return json.dumps(_to_json_compatible(spec), indent=indent, allow_nan=False)


def write_spec(
    spec: Mapping[str, object],
    path: str | Path,
    indent: int | None = 2,
) -> Path:
    """
    Write a spec to ``path`` as JSON.

    Parameters
    ----------
    spec
        Spec returned by :func:`~genomespy_cnv.genomespy_config.create_spec`.
    path
        Output file. Missing parent directories are created.
    indent
        JSON indentation; ``None`` writes a single line.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ValueError
        If ``path`` is an existing directory.
    """
    path = Path(path)
    if path.is_dir():
        raise ValueError(f"path must be a file, got directory '{path}'.")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(spec_to_json(spec, indent=indent), encoding="utf-8")
    logger.info(f"Wrote GenomeSpy spec to '{path}'.")
    return path
