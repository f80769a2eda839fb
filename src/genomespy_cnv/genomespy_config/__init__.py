"""GenomeSpy spec builders."""

from typing import TYPE_CHECKING

import lazy_loader as lazy

if TYPE_CHECKING:
    from ._copy_ratio import create_spec
    from ._export import spec_to_json, write_spec
    from ._layers import create_credible_interval_layer, get_geometric_zoom_bound

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submod_attrs={
        "_copy_ratio": ["create_spec"],
        "_export": ["spec_to_json", "write_spec"],
        "_layers": [
            "create_credible_interval_layer",
            "get_geometric_zoom_bound",
        ],
    },
)

__all__ = [
    "create_credible_interval_layer",
    "create_spec",
    "get_geometric_zoom_bound",
    "spec_to_json",
    "write_spec",
]
