"""
Reading of BEDPE files. Each line is tagged as a valid record, a line to skip (header, blank or malformed),
or the end of the input
"""
import sys
from typing import IO, Iterator, NamedTuple, Optional

from .constants import HEADER_PREFIXES, MIN_COLUMNS, RECORD_STATUS, STDIN, STRAND
from .error import InvalidRecordError
from .util import logger


class PairedRecord:
    """
    a pair of genomic intervals from a single line of a BEDPE file. Coordinates are as given in the file
    """

    __slots__ = [
        'chrom1',
        'start1',
        'end1',
        'chrom2',
        'start2',
        'end2',
        'name',
        'score',
        'strand1',
        'strand2',
        'line_no',
    ]

    def __init__(
        self,
        chrom1: str,
        start1: int,
        end1: int,
        chrom2: str,
        start2: int,
        end2: int,
        name: Optional[str] = None,
        score: Optional[str] = None,
        strand1: str = STRAND.NS,
        strand2: str = STRAND.NS,
        line_no: Optional[int] = None,
    ):
        self.chrom1 = chrom1
        self.start1 = start1
        self.end1 = end1
        self.chrom2 = chrom2
        self.start2 = start2
        self.end2 = end2
        self.name = name
        self.score = score
        self.strand1 = strand1
        self.strand2 = strand2
        self.line_no = line_no

    @property
    def key(self):
        return (
            self.chrom1,
            self.start1,
            self.end1,
            self.strand1,
            self.chrom2,
            self.start2,
            self.end2,
            self.strand2,
        )

    @property
    def same_chromosome(self) -> bool:
        return self.chrom1 == self.chrom2

    @property
    def distance(self) -> int:
        """
        absolute distance between the start positions of the two intervals
        """
        return abs(self.start2 - self.start1)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return 'PairedRecord({}:{}-{}{}, {}:{}-{}{})'.format(
            self.chrom1,
            self.start1,
            self.end1,
            '' if self.strand1 == STRAND.NS else self.strand1,
            self.chrom2,
            self.start2,
            self.end2,
            '' if self.strand2 == STRAND.NS else self.strand2,
        )


class ReadResult(NamedTuple):
    status: str
    record: Optional[PairedRecord]
    line_no: int


def is_header(line: str) -> bool:
    return line.startswith(HEADER_PREFIXES)


def _parse_coordinate(value: str, column: str, line_no: Optional[int]) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidRecordError(f'{column} is not an integer: {value!r}', line_no)


def _parse_strand(value: Optional[str]) -> str:
    """
    strand tokens are kept as given, a missing or empty column is not specified
    """
    if not value:
        return STRAND.NS
    return value


def parse_bedpe_line(line: str, line_no: Optional[int] = None) -> PairedRecord:
    """
    parse a single non-header line of a BEDPE file

    Args:
        line: the line (without the header prefixes) to be parsed
        line_no: 1-based line number used in error messages

    Returns:
        the record given on the line

    Raises:
        InvalidRecordError: the line is missing required columns or has invalid coordinates

    Example:
        >>> parse_bedpe_line('chr1\t100\t101\tchr1\t500\t501\tsv1\t0\t+\t-')
        PairedRecord(chr1:100-101+, chr1:500-501-)
    """
    fields = line.rstrip('\r\n').split('\t')
    if len(fields) < MIN_COLUMNS:
        fields = line.split()
    if len(fields) < MIN_COLUMNS:
        raise InvalidRecordError(
            f'expected at least {MIN_COLUMNS} columns but found {len(fields)}', line_no
        )
    chrom1, start1, end1, chrom2, start2, end2 = [f.strip() for f in fields[:MIN_COLUMNS]]
    start1 = _parse_coordinate(start1, 'start1', line_no)
    end1 = _parse_coordinate(end1, 'end1', line_no)
    start2 = _parse_coordinate(start2, 'start2', line_no)
    end2 = _parse_coordinate(end2, 'end2', line_no)

    for start, end, side in [(start1, end1, 1), (start2, end2, 2)]:
        if start > end:
            raise InvalidRecordError(f'start{side} ({start}) is after end{side} ({end})', line_no)

    optional = [f.strip() for f in fields[MIN_COLUMNS : MIN_COLUMNS + 4]]
    optional.extend([None] * (4 - len(optional)))
    name, score, strand1, strand2 = optional

    return PairedRecord(
        chrom1,
        start1,
        end1,
        chrom2,
        start2,
        end2,
        name=name,
        score=score,
        strand1=_parse_strand(strand1),
        strand2=_parse_strand(strand2),
        line_no=line_no,
    )


def open_input(filename: str) -> IO[str]:
    if filename == STDIN:
        return sys.stdin
    return open(filename, 'r')


class BedpeReader:
    """
    pull-based reader over the lines of a BEDPE file

    Example:
        >>> with BedpeReader('input.bedpe') as reader:
        ...     result = reader.next_record()
    """

    def __init__(self, filename: str = STDIN):
        self.filename = filename
        self.line_no = 0
        self.skipped = 0
        self.malformed = 0
        self._fh: Optional[IO[str]] = None

    def open(self):
        if self._fh is None:
            logger.info(f'reading: {self.filename}')
            self._fh = open_input(self.filename)
            self.line_no = 0
        return self

    def close(self):
        if self._fh is not None and self._fh is not sys.stdin:
            self._fh.close()
        self._fh = None

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()
        return False

    def next_record(self) -> ReadResult:
        """
        read the next line of the input

        Returns:
            the tagged outcome. SKIP results have no record
        """
        if self._fh is None:
            raise RuntimeError('reader must be opened before records can be read', self.filename)
        line = self._fh.readline()
        if not line:
            return ReadResult(RECORD_STATUS.END, None, self.line_no)
        self.line_no += 1

        if not line.strip() or is_header(line):
            logger.debug(f'skipping non-record line {self.line_no}')
            self.skipped += 1
            return ReadResult(RECORD_STATUS.SKIP, None, self.line_no)
        try:
            record = parse_bedpe_line(line, self.line_no)
        except InvalidRecordError as err:
            logger.warning(f'skipping malformed record ({self.filename}) {err}')
            self.skipped += 1
            self.malformed += 1
            return ReadResult(RECORD_STATUS.SKIP, None, self.line_no)
        return ReadResult(RECORD_STATUS.VALID, record, self.line_no)

    def __iter__(self) -> Iterator[ReadResult]:
        result = self.next_record()
        while result.status != RECORD_STATUS.END:
            yield result
            result = self.next_record()


def read_bedpe(filename: str = STDIN) -> Iterator[PairedRecord]:
    """
    iterate over the valid records of a BEDPE file, ignoring headers and malformed lines
    """
    with BedpeReader(filename) as reader:
        for result in reader:
            if result.status == RECORD_STATUS.VALID:
                yield result.record
