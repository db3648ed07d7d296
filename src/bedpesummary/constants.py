"""
module responsible for small utility functions and constants used throughout the bedpesummary package
"""
from mavis_config.constants import MavisNamespace

PROGNAME: str = 'bedpesummary'
EXIT_OK: int = 0

HISTOGRAM_BINS: int = 10
"""the number of bins in the distance histogram of the report"""

STDIN: str = 'stdin'
"""input filename which indicates the records should be read from standard input"""

HEADER_PREFIXES = ('#', 'track', 'browser')
"""lines starting with any of these are header lines rather than records"""

MIN_COLUMNS: int = 6
"""chrom1, start1, end1, chrom2, start2, end2"""


class STRAND(MavisNamespace):
    """
    holds controlled vocabulary for allowed strand values

    Attributes:
        POS: the positive/forward strand
        NEG: the negative/reverse strand
        NS: strand is not specified
    """

    POS: str = '+'
    NEG: str = '-'
    NS: str = '.'


class SVTYPE(MavisNamespace):
    """
    holds controlled vocabulary for the structural variant categories inferred from the strand pair
    """

    INV: str = 'inversion'
    INS: str = 'insertion'
    DEL: str = 'deletion'


class RECORD_STATUS(MavisNamespace):
    """
    outcome of reading a single line from a BEDPE file

    Attributes:
        VALID: the line was parsed into a record
        SKIP: header, blank or malformed line which is not counted
        END: there are no more lines to read
    """

    VALID: str = 'valid'
    SKIP: str = 'skip'
    END: str = 'end'


class REPORT_STYLE(MavisNamespace):
    """
    layouts available for the summary report

    Attributes:
        JSON: JSON document with the report keys in their fixed order
        LEGACY: the line layout of the bedtools bedpesummary report
    """

    JSON: str = 'json'
    LEGACY: str = 'legacy'


class REPORT_KEY(MavisNamespace):
    """
    field names of the summary report. The spelling is kept for downstream consumers
    """

    INVERSION: str = 'inversion'
    INSERTION: str = 'insertion'
    DELETION: str = 'deletion'
    N_INTERCHROM: str = 'n_interchrom'
    N_INTRACHROM: str = 'n_intrachrom'
    MEAN: str = 'mean intrachromasomal sv length'
    MEDIAN: str = 'median intrachromasomal sv length'
    HISTOGRAM: str = 'histogram'
    MIN_VAL: str = 'min_val'
    BIN_WIDTH: str = 'bin_width'
    BIN_COUNTS: str = 'bin_counts'
