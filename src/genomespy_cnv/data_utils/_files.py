from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd
from loguru import logger

Row = Mapping[str, Any]


class FileType(str, Enum):
    """Kinds of tabular files written by the copy-number caller."""

    SEG = "seg"  # modelled segments
    CR = "cr"  # denoised copy ratios
    HETS = "hets"  # allelic counts at heterozygous sites
    DICT = "dict"  # sequence dictionary


def _to_python_scalar(value: object) -> object:
    if isinstance(value, np.generic):
        value = value.item()
    # pd.NA and NaT from nullable and datetime columns.
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return float("nan")
    return value


def records_from_dataframe(df: pd.DataFrame) -> list[dict[str, Any]]:
    """
    Convert a parsed table to a list of row dictionaries.

    Parameters
    ----------
    df
        Table with one row per record. Column order is preserved in every row.

    Returns
    -------
    list[dict[str, Any]]
        Rows in table order. numpy scalars are converted to Python scalars;
        missing values of any dtype (``NaN``, ``pd.NA``, ``NaT``, ``None``)
        become ``float("nan")``.
    """
    columns = [str(c) for c in df.columns]
    records = [
        {column: _to_python_scalar(value) for column, value in zip(columns, row)}
        for row in df.itertuples(index=False, name=None)
    ]
    logger.debug(f"Converted table with {len(records)} rows and {len(columns)} columns.")
    return records


@dataclass(frozen=True)
class UploadedFile:
    """A parsed file: its rows in file order."""

    data: Sequence[Row] = field(default_factory=list)
    name: str | None = None

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, name: str | None = None) -> "UploadedFile":
        return cls(data=records_from_dataframe(df), name=name)

    def __len__(self) -> int:
        return len(self.data)
