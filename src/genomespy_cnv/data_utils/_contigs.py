import re
from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from genomespy_cnv.data_utils._files import Row

_HUMAN_GENOME_BUILD = re.compile(r"hg\d+", re.ASCII)
# Autosomes 1-22 and the sex chromosomes, with or without the "chr" prefix.
_PRIMARY_CONTIG = re.compile(r"(chr)?(\d{1,2}|[XY])", re.ASCII)

# Never equal to a real contig value, including None.
_NO_CONTIG = object()


def _contig_label(contig: object) -> str:
    # Numeric columns with gaps are read as floats: 1.0 is contig "1".
    if isinstance(contig, float) and contig.is_integer():
        return str(int(contig))
    return str(contig)


def is_human_genome_build(genome_name: str | None) -> bool:
    """Return True when ``genome_name`` looks like a UCSC human build, e.g. ``hg38``."""
    if genome_name is None:
        return False
    return _HUMAN_GENOME_BUILD.match(genome_name) is not None


def filter_contigs(rows: Iterable[Row], genome_name: str | None = None) -> list[Row]:
    """
    Drop rows on non-primary contigs when ``genome_name`` is a human build.

    Parameters
    ----------
    rows
        Rows with a ``contig`` column. They are expected to be grouped by
        contig: runs of the same contig reuse the verdict of the first row of
        the run instead of matching the contig again.
    genome_name
        Genome build name. Filtering only happens for ``hg*`` builds; any other
        value (or ``None``) returns the rows unchanged.

    Returns
    -------
    list[Row]
        The kept rows, in input order.

    Notes
    -----
    Because of the run-based shortcut, input where one contig appears in
    several separate runs is outside the guarantee that the result equals
    matching every row on its own. Upstream tables are sorted by contig.
    """
    rows = list(rows)
    if not is_human_genome_build(genome_name):
        return rows

    kept: list[Row] = []
    prev_contig: object = _NO_CONTIG
    prev_keep = False
    for row in rows:
        contig = row.get("contig")
        if contig != prev_contig:
            prev_contig = contig
            prev_keep = _PRIMARY_CONTIG.fullmatch(_contig_label(contig)) is not None
        if prev_keep:
            kept.append(row)

    logger.debug(
        f"Kept {len(kept)} of {len(rows)} rows on primary contigs for '{genome_name}'."
    )
    return kept


def get_data(
    files: Mapping[Any, Any],
    key: Any,
    genome_name: str | None = None,
) -> list[Row]:
    """
    Return the rows of ``files[key]``, filtered with :func:`filter_contigs`.

    A missing file yields an empty list.
    """
    uploaded_file = files.get(key)
    if uploaded_file is None:
        logger.debug(f"No file for '{key}'; using no rows.")
        return []
    return filter_contigs(uploaded_file.data, genome_name)
