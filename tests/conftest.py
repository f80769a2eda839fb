"""Shared fixtures: a small copy-number caller output on hg38-style contigs."""

import pytest

from genomespy_cnv.data_utils import FileType, UploadedFile

SEGMENTS = [
    {"contig": "chr1", "start": 1, "end": 5000, "LOG2_COPY_RATIO_POSTERIOR_50": 0.1},
    {"contig": "chr1", "start": 5001, "end": 9000, "LOG2_COPY_RATIO_POSTERIOR_50": -0.4},
    {"contig": "chr2", "start": 1, "end": 8000, "LOG2_COPY_RATIO_POSTERIOR_50": 0.0},
    {"contig": "chrM", "start": 1, "end": 16569, "LOG2_COPY_RATIO_POSTERIOR_50": 0.3},
    {"contig": "chrX", "start": 1, "end": 7000, "LOG2_COPY_RATIO_POSTERIOR_50": -1.0},
]

COPY_RATIOS = [
    {"contig": "chr1", "pos": 100, "logR": 0.2},
    {"contig": "chr1", "pos": 200, "logR": -0.1},
    {"contig": "chr2", "pos": 150, "logR": 0.05},
    {"contig": "GL000192.1", "pos": 10, "logR": 1.5},
    {"contig": "chrY", "pos": 300, "logR": -4.0},
]

HETS = [
    {"contig": "chr1", "pos": 120, "baf": 0.48},
    {"contig": "chr2", "pos": 180, "baf": 0.31},
    {"contig": "chrM", "pos": 50, "baf": 0.5},
]

CONTIGS = [
    {"name": "chr1", "size": 10000},
    {"name": "chr2", "size": 8000},
]


@pytest.fixture
def files():
    return {
        FileType.SEG: UploadedFile([dict(r) for r in SEGMENTS]),
        FileType.CR: UploadedFile([dict(r) for r in COPY_RATIOS]),
        FileType.HETS: UploadedFile([dict(r) for r in HETS]),
        FileType.DICT: UploadedFile([dict(r) for r in CONTIGS]),
    }
