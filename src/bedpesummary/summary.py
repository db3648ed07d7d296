"""
Classification and accumulation of paired records, and the statistics computed from them once the input is
exhausted
"""
import math
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Union

from .bedpe import BedpeReader, PairedRecord
from .constants import HISTOGRAM_BINS, RECORD_STATUS, REPORT_KEY, STDIN, STRAND, SVTYPE
from .util import logger

Number = Union[int, float]


def calculate_median(values: List[int]) -> Number:
    """
    exact median. The mean of the two middle values is truncated for an even number of values

    Args:
        values: the values to find the median of, sorted in place

    Returns:
        the median or NaN if there are no values

    Example:
        >>> calculate_median([5, 1, 3, 2])
        2
    """
    if not values:
        return math.nan
    values.sort()
    mid = len(values) // 2
    if len(values) % 2:
        return values[mid]
    return (values[mid - 1] + values[mid]) // 2


def calculate_mean(total: int, count: int) -> Number:
    if count == 0:
        return math.nan
    return total // count


class Histogram:
    """
    fixed number of equal integer width bins spanning the range of the input values.
    Values on the upper edge of the range are counted in the last bin
    """

    def __init__(self, values: Iterable[int], bin_count: int = HISTOGRAM_BINS):
        values = list(values)
        self.bin_count = bin_count
        self.min_val = 0
        self.max_val = 0
        self.bin_width = 0
        counts = [0] * max(bin_count, 0)

        if values and bin_count > 0:
            self.min_val = min(values)
            self.max_val = max(values)
            self.bin_width = (self.max_val - self.min_val) // bin_count

            # all values equal or the range is narrower than the bin count
            if self.bin_width != 0:
                for value in values:
                    index = min((value - self.min_val) // self.bin_width, bin_count - 1)
                    counts[index] += 1
        self.bin_counts = tuple(counts)

    def to_dict(self) -> Dict:
        return OrderedDict(
            [
                (REPORT_KEY.MIN_VAL, self.min_val),
                (REPORT_KEY.BIN_WIDTH, self.bin_width),
                (REPORT_KEY.BIN_COUNTS, list(self.bin_counts)),
            ]
        )

    def __repr__(self):
        return 'Histogram(min_val={}, bin_width={}, bin_counts={})'.format(
            self.min_val, self.bin_width, list(self.bin_counts)
        )


class BedpeSummary:
    """
    the final statistics for a BEDPE file
    """

    def __init__(
        self,
        inversion: int,
        insertion: int,
        deletion: int,
        n_interchrom: int,
        n_intrachrom: int,
        mean_length: Number,
        median_length: Number,
        histogram: Histogram,
    ):
        self.inversion = inversion
        self.insertion = insertion
        self.deletion = deletion
        self.n_interchrom = n_interchrom
        self.n_intrachrom = n_intrachrom
        self.mean_length = mean_length
        self.median_length = median_length
        self.histogram = histogram

    def to_dict(self) -> Dict:
        """
        the report fields in the order they are written
        """
        return OrderedDict(
            [
                (REPORT_KEY.INVERSION, self.inversion),
                (REPORT_KEY.INSERTION, self.insertion),
                (REPORT_KEY.DELETION, self.deletion),
                (REPORT_KEY.N_INTERCHROM, self.n_interchrom),
                (REPORT_KEY.N_INTRACHROM, self.n_intrachrom),
                (REPORT_KEY.MEAN, self.mean_length),
                (REPORT_KEY.MEDIAN, self.median_length),
                (REPORT_KEY.HISTOGRAM, self.histogram.to_dict()),
            ]
        )


class SummaryAccumulator:
    """
    running counts over the records of a single BEDPE file

    Attributes:
        n_interchrom: records whose intervals are on different chromosomes
        n_intrachrom: records whose intervals are on the same chromosome
        inversion: same chromosome records with matching strands
        deletion: same chromosome records with strands +/-
        insertion: same chromosome records with strands -/+
        total_distance: sum of the same chromosome distances
        distances: distance of every same chromosome record, kept for the median and histogram.
            Grows with the number of same chromosome records
    """

    def __init__(self):
        self.n_interchrom = 0
        self.n_intrachrom = 0
        self.inversion = 0
        self.insertion = 0
        self.deletion = 0
        self.total_distance = 0
        self.distances: List[int] = []

    @property
    def n_records(self) -> int:
        return self.n_interchrom + self.n_intrachrom

    def add(self, record: PairedRecord) -> Optional[str]:
        """
        classify a record and update the counts

        Returns:
            the structural variant type assigned to the record, if any
        """
        if not record.same_chromosome:
            self.n_interchrom += 1
            return None
        self.n_intrachrom += 1
        distance = record.distance
        self.distances.append(distance)
        self.total_distance += distance

        svtype = classify_strands(record.strand1, record.strand2)
        if svtype == SVTYPE.INV:
            self.inversion += 1
        elif svtype == SVTYPE.DEL:
            self.deletion += 1
        elif svtype == SVTYPE.INS:
            self.insertion += 1
        return svtype

    def finalize(self, bin_count: int = HISTOGRAM_BINS) -> BedpeSummary:
        return BedpeSummary(
            inversion=self.inversion,
            insertion=self.insertion,
            deletion=self.deletion,
            n_interchrom=self.n_interchrom,
            n_intrachrom=self.n_intrachrom,
            mean_length=calculate_mean(self.total_distance, self.n_intrachrom),
            median_length=calculate_median(self.distances),
            histogram=Histogram(self.distances, bin_count),
        )


def classify_strands(strand1: str, strand2: str) -> Optional[str]:
    """
    infer the structural variant type of a same chromosome record from its strands.
    Matching strands are checked first so +/+ and -/- are always inversions

    Example:
        >>> classify_strands('+', '-')
        'deletion'
        >>> classify_strands('+', '.') is None
        True
    """
    if strand1 == strand2:
        return SVTYPE.INV
    elif strand1 == STRAND.POS and strand2 == STRAND.NEG:
        return SVTYPE.DEL
    elif strand1 == STRAND.NEG and strand2 == STRAND.POS:
        return SVTYPE.INS
    return None


def summarize(records: Iterable[PairedRecord], bin_count: int = HISTOGRAM_BINS) -> BedpeSummary:
    """
    compute the summary statistics for a collection of records
    """
    accumulator = SummaryAccumulator()
    for record in records:
        accumulator.add(record)
    return accumulator.finalize(bin_count)


def summarize_file(filename: str = STDIN, bin_count: int = HISTOGRAM_BINS) -> Optional[BedpeSummary]:
    """
    read a BEDPE file and compute its summary statistics

    Args:
        filename: path to the input file or 'stdin'
        bin_count: number of histogram bins

    Returns:
        the summary, or None if the input has no lines at all
    """
    with BedpeReader(filename) as reader:
        result = reader.next_record()
        if result.status == RECORD_STATUS.END:
            logger.info(f'no lines to summarize: {filename}')
            return None

        accumulator = SummaryAccumulator()
        while result.status != RECORD_STATUS.END:
            if result.status == RECORD_STATUS.VALID:
                accumulator.add(result.record)
            result = reader.next_record()

        logger.info(
            f'read {reader.line_no} lines: {accumulator.n_records} records, {reader.skipped} skipped '
            f'({reader.malformed} malformed)'
        )
    if reader.malformed:
        logger.warning(f'{reader.malformed} malformed lines were not counted')
    return accumulator.finalize(bin_count)
