"""Names, colors and thresholds shared by the copy-ratio spec.

Import and data names must match what GenomeSpy ships; the field templates
follow the column headers of the copy-number caller's output tables.
"""

# Mark colors.
COLOR_INTERVAL = "#f70"
COLOR_RULE = "black"
COLOR_POINT = "#49A0F2"
COLOR_BACKGROUND = "#f7f7f7"
COLOR_CHROM_GRID = "#d8d8d8"

# Named tracks and imports provided by GenomeSpy.
LOG_R_TRACK = "logRTrack"
BAF_TRACK = "bafTrack"
CHROM_GRID = "chromGrid"
CHROM_SIZES_DATA = "chromSizes"
CYTOBANDS_IMPORT = "cytobands"
GENOME_AXIS_IMPORT = "genomeAxis"
GENE_ANNOTATION_IMPORT = "geneAnnotation"
GC_CONTENT_URL_TEMPLATE = (
    "https://genomespy.app/tracks/gc-content/gc-content.{genome_name}.json"
)

# Column names written by the copy-number caller.
CONTIG_FIELD = "contig"
LOG_R_FIELD = "logR"
BAF_FIELD = "baf"
LOG2_COPY_RATIO_FIELD = "LOG2_COPY_RATIO_POSTERIOR_{percentile}"
MINOR_ALLELE_FRACTION_FIELD = "MINOR_ALLELE_FRACTION_POSTERIOR_{percentile}"
CREDIBLE_INTERVAL_PERCENTILES = (10, 50, 90)

# Points and segments at or below this log2 ratio are not drawn.
MIN_LOG2_COPY_RATIO = -3

# Points rendered at once before the geometric zoom bound kicks in.
ZOOM_BOUND_POINT_BUDGET = 1000
