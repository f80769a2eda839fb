from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from genomespy_cnv.data_utils._contigs import get_data, is_human_genome_build
from genomespy_cnv.data_utils._files import FileType, Row
from genomespy_cnv.genomespy_config._constants import (
    BAF_FIELD,
    BAF_TRACK,
    COLOR_BACKGROUND,
    COLOR_POINT,
    CONTIG_FIELD,
    CREDIBLE_INTERVAL_PERCENTILES,
    CYTOBANDS_IMPORT,
    GC_CONTENT_URL_TEMPLATE,
    GENE_ANNOTATION_IMPORT,
    GENOME_AXIS_IMPORT,
    LOG2_COPY_RATIO_FIELD,
    LOG_R_FIELD,
    LOG_R_TRACK,
    MIN_LOG2_COPY_RATIO,
    MINOR_ALLELE_FRACTION_FIELD,
)
from genomespy_cnv.genomespy_config._layers import (
    chrom_grid_layer,
    create_credible_interval_layer,
    get_geometric_zoom_bound,
)


def _percentile_fields(template: str) -> tuple[str, str, str]:
    lower, middle, upper = (
        template.format(percentile=p) for p in CREDIBLE_INTERVAL_PERCENTILES
    )
    return lower, middle, upper


@dataclass
class _CopyRatioSpecBuilder:
    genome_name: str | None
    segments: Sequence[Row]
    copy_ratios: Sequence[Row]
    hets: Sequence[Row]
    contigs: Sequence[Row] | None = None

    def _genome(self) -> dict[str, object]:
        if self.genome_name:
            return {"name": self.genome_name}
        return {"contigs": self.contigs if self.contigs is not None else []}

    def _leading_imports(self) -> list[dict[str, object]]:
        if not self.genome_name:
            return []
        return [
            {"import": {"name": CYTOBANDS_IMPORT}},
            {
                "import": {
                    "url": GC_CONTENT_URL_TEMPLATE.format(genome_name=self.genome_name)
                }
            },
        ]

    def _trailing_imports(self) -> list[dict[str, object]]:
        imports: list[dict[str, object]] = [{"import": {"name": GENOME_AXIS_IMPORT}}]
        if self.genome_name:
            imports.append({"import": {"name": GENE_ANNOTATION_IMPORT}})
        return imports

    def _point_layer(
        self,
        values: Sequence[Row],
        title: str,
        y_field: str,
        opacity: float,
        x_offset: float | None = None,
        y_scale: dict[str, object] | None = None,
        transform: list[dict[str, object]] | None = None,
    ) -> dict[str, object]:
        x: dict[str, object] = {"chrom": CONTIG_FIELD, "pos": "pos"}
        if x_offset is not None:
            x["offset"] = x_offset
        x["type"] = "quantitative"
        y: dict[str, object] = {"field": y_field, "type": "quantitative", "title": None}
        if y_scale is not None:
            y["scale"] = y_scale

        layer: dict[str, object] = {"data": {"values": values}}
        if transform is not None:
            layer["transform"] = transform
        layer.update(
            {
                "title": title,
                "mark": {
                    "type": "point",
                    # Counts every point, including the ones the transform drops.
                    "geometricZoomBound": get_geometric_zoom_bound(len(values)),
                },
                "encoding": {
                    "x": x,
                    "y": y,
                    "color": {"value": COLOR_POINT},
                    "size": {"value": 150},
                    "opacity": {"value": opacity},
                    "strokeWidth": {"value": 0},
                },
            }
        )
        return layer

    def _log_r_track(self) -> dict[str, object]:
        points = self._point_layer(
            self.copy_ratios,
            title="Single interval midpoint",
            y_field=LOG_R_FIELD,
            opacity=0.25,
            y_scale={},
            transform=[
                {
                    "type": "filter",
                    "expr": (
                        f"!isNaN(datum.{LOG_R_FIELD}) && "
                        f"datum.{LOG_R_FIELD} > {MIN_LOG2_COPY_RATIO}"
                    ),
                }
            ],
        )

        lower, middle, upper = _percentile_fields(LOG2_COPY_RATIO_FIELD)
        denoised = {
            "title": "Denoised copy-ratio",
            "transform": [
                {"type": "filter", "expr": f"datum.{middle} > {MIN_LOG2_COPY_RATIO}"}
            ],
            "layer": create_credible_interval_layer(
                middle, lower=lower, upper=upper, title="Log2 copy ratio"
            ),
        }

        return {
            "name": LOG_R_TRACK,
            "plotBackground": COLOR_BACKGROUND,
            "layer": [chrom_grid_layer(), points, denoised],
        }

    def _baf_track(self) -> dict[str, object]:
        points = self._point_layer(
            self.hets,
            title="B allele frequency",
            y_field=BAF_FIELD,
            opacity=0.3,
            x_offset=-0.5,
        )

        lower, middle, upper = _percentile_fields(MINOR_ALLELE_FRACTION_FIELD)
        minor = {
            "layer": create_credible_interval_layer(
                middle,
                lower=lower,
                upper=upper,
                title="Alternate-allele fraction",
                domain=(0, 1),
            )
        }
        # Mirror the minor-allele fraction to draw the alternate allele too.
        mirrored = {
            "transform": [
                {"type": "formula", "expr": f"1 - datum.{field}", "as": field}
                for field in (lower, middle, upper)
            ],
            "layer": create_credible_interval_layer(middle, lower=lower, upper=upper),
        }

        return {
            "name": BAF_TRACK,
            "plotBackground": COLOR_BACKGROUND,
            "layer": [
                chrom_grid_layer(),
                points,
                {"title": "Alternate-allele fraction", "layer": [minor, mirrored]},
            ],
        }

    def build(self) -> dict[str, object]:
        concat: list[dict[str, object]] = []
        concat.extend(self._leading_imports())
        concat.append(self._log_r_track())
        concat.append(self._baf_track())
        concat.extend(self._trailing_imports())

        return {
            "genome": self._genome(),
            "data": {"values": self.segments},
            "encoding": {
                "x": {
                    "chrom": CONTIG_FIELD,
                    "pos": "start",
                    "type": "quantitative",
                    "offset": -1,
                },
                "x2": {"chrom": CONTIG_FIELD, "pos": "end"},
            },
            "concat": concat,
        }


def create_spec(
    files: Mapping[Any, Any],
    genome_name: str | None = None,
) -> dict[str, object]:
    """
    Build a GenomeSpy specification for copy-ratio and allele-fraction data.

    Parameters
    ----------
    files
        Parsed files keyed by :class:`~genomespy_cnv.data_utils.FileType`.
        Values expose their rows as ``data``. Missing kinds are treated as
        empty tables.
    genome_name
        Genome build known to GenomeSpy, e.g. ``"hg38"``. When set, the genome
        is referenced by name and the cytoband, GC-content and gene annotation
        tracks are added. ``hg*`` builds additionally restrict rows to the
        primary contigs. When ``None``, the contigs of the ``DICT`` file
        define the genome.

    Returns
    -------
    dict[str, object]
        A JSON-serializable spec with the keys ``genome``, ``data``,
        ``encoding`` and ``concat``.

    Raises
    ------
    TypeError
        If ``genome_name`` is neither a string nor ``None``.
    """
    if genome_name is not None and not isinstance(genome_name, str):
        raise TypeError(
            f"genome_name must be a string or None, got {type(genome_name).__name__}."
        )
    if genome_name and not is_human_genome_build(genome_name):
        logger.debug(
            f"Genome '{genome_name}' is not a human build; contigs are not filtered."
        )

    contigs = None
    if not genome_name:
        dict_file = files.get(FileType.DICT)
        if dict_file is None:
            logger.warning(
                "No genome name and no sequence dictionary were provided. "
                "GenomeSpy cannot lay out contigs without one of them."
            )
        else:
            contigs = dict_file.data

    segments, copy_ratios, hets = (
        get_data(files, key, genome_name)
        for key in (FileType.SEG, FileType.CR, FileType.HETS)
    )
    logger.debug(
        f"Building spec from {len(segments)} segments, {len(copy_ratios)} copy "
        f"ratios and {len(hets)} heterozygous sites."
    )

    return _CopyRatioSpecBuilder(
        genome_name=genome_name,
        segments=segments,
        copy_ratios=copy_ratios,
        hets=hets,
        contigs=contigs,
    ).build()
