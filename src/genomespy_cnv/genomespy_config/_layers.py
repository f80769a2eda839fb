import copy
import math
from collections.abc import Sequence

import numpy as np

from genomespy_cnv.genomespy_config._constants import (
    CHROM_GRID,
    CHROM_SIZES_DATA,
    COLOR_CHROM_GRID,
    COLOR_INTERVAL,
    COLOR_RULE,
    ZOOM_BOUND_POINT_BUDGET,
)

_CHROM_GRID_LAYER: dict[str, object] = {
    "name": CHROM_GRID,
    "mark": "rule",
    "data": {"name": CHROM_SIZES_DATA},
    "encoding": {
        "x": {
            "chrom": "name",
            "pos": "size",
            "type": "quantitative",
        },
        "color": {"value": COLOR_CHROM_GRID},
    },
}


def chrom_grid_layer() -> dict[str, object]:
    """Return a fresh copy of the chromosome grid background layer."""
    return copy.deepcopy(_CHROM_GRID_LAYER)


def create_credible_interval_layer(
    middle: str,
    *,
    lower: str | None = None,
    upper: str | None = None,
    title: str | None = None,
    domain: Sequence[float] | None = None,
) -> list[dict[str, object]]:
    """
    Build the layers that draw a point estimate with its credible interval.

    Parameters
    ----------
    middle
        Field holding the point estimate, drawn as a thick rule.
    lower
        Field holding the lower bound of the interval.
    upper
        Field holding the upper bound of the interval.
        The shaded band is only drawn when both ``lower`` and ``upper`` are set.
    title
        Title of the vertical axis. ``None`` hides the title.
    domain
        Optional ``(min, max)`` value range of the vertical scale.

    Returns
    -------
    list[dict[str, object]]
        One or two GenomeSpy layers. The band, when present, comes first so the
        rule renders above it.

    Raises
    ------
    ValueError
        If ``domain`` is provided but does not hold exactly two values.
    """
    if domain is not None and len(domain) != 2:
        raise ValueError("domain must be a sequence of two numbers: (min, max).")

    layer: list[dict[str, object]] = []

    if lower and upper:
        layer.append(
            {
                "mark": {
                    "type": "rect",
                    "minWidth": 2.0,
                    "minOpacity": 1.0,
                },
                "encoding": {
                    "y": {
                        "field": lower,
                        "type": "quantitative",
                        "title": None,
                    },
                    "y2": {"field": upper},
                    "color": {"value": COLOR_INTERVAL},
                    "opacity": {"value": 0.3},
                },
            }
        )

    # GenomeSpy treats an empty scale as "use the defaults".
    scale: dict[str, object] = {} if domain is None else {"domain": list(domain)}
    layer.append(
        {
            "mark": {
                "type": "rule",
                "size": 3.0,
                "minLength": 3.0,
            },
            "encoding": {
                "y": {
                    "field": middle,
                    "type": "quantitative",
                    "scale": scale,
                    "title": title,
                },
                "color": {"value": COLOR_RULE},
            },
        }
    )

    return layer


def get_geometric_zoom_bound(count: int) -> float:
    """
    Return the zoom level at which individual points start to render.

    ``max(0, log((count - 1000) / 4) / log(3))``, or ``0`` when that is not a
    finite positive number. Counts up to 1000 therefore always give ``0``.
    """
    # TODO: replace with GenomeSpy's "auto" zoom bound once it lands upstream.
    with np.errstate(divide="ignore", invalid="ignore"):
        bound = np.log((count - ZOOM_BOUND_POINT_BUDGET) / 4) / np.log(3)
    bound = max(0.0, float(bound))
    if not math.isfinite(bound) or not bound:
        return 0
    return bound
