"""Shared data utilities."""

from typing import TYPE_CHECKING

import lazy_loader as lazy

if TYPE_CHECKING:
    from ._contigs import filter_contigs, get_data, is_human_genome_build
    from ._files import FileType, UploadedFile, records_from_dataframe

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submod_attrs={
        "_files": ["FileType", "UploadedFile", "records_from_dataframe"],
        "_contigs": ["filter_contigs", "get_data", "is_human_genome_build"],
    },
)

__all__ = [
    "FileType",
    "UploadedFile",
    "records_from_dataframe",
    "filter_contigs",
    "get_data",
    "is_human_genome_build",
]
