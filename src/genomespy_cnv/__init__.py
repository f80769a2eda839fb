"""genomespy_cnv package."""

from typing import TYPE_CHECKING

import lazy_loader as lazy

if TYPE_CHECKING:
    from . import data_utils, genomespy_config
    from .genomespy_config import (
        create_credible_interval_layer,
        create_spec,
        get_geometric_zoom_bound,
        spec_to_json,
        write_spec,
    )

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submodules=["data_utils", "genomespy_config"],
    submod_attrs={
        "genomespy_config": [
            "create_credible_interval_layer",
            "create_spec",
            "get_geometric_zoom_bound",
            "spec_to_json",
            "write_spec",
        ],
    },
)

__all__ = [
    "data_utils",
    "genomespy_config",
    "create_credible_interval_layer",
    "create_spec",
    "get_geometric_zoom_bound",
    "spec_to_json",
    "write_spec",
]
