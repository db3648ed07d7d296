import itertools
import math

import pytest
from bedpesummary.bedpe import PairedRecord
from bedpesummary.constants import REPORT_KEY, STRAND, SVTYPE
from bedpesummary.summary import (
    Histogram,
    SummaryAccumulator,
    calculate_mean,
    calculate_median,
    classify_strands,
    summarize,
    summarize_file,
)

from ..util import get_data


def record(chrom1, start1, chrom2, start2, strand1=STRAND.NS, strand2=STRAND.NS):
    return PairedRecord(
        chrom1, start1, start1 + 1, chrom2, start2, start2 + 1, strand1=strand1, strand2=strand2
    )


@pytest.fixture
def three_types():
    return [
        record('chrA', 0, 'chrA', 100, STRAND.POS, STRAND.NEG),
        record('chrA', 0, 'chrA', 300, STRAND.NEG, STRAND.POS),
        record('chrA', 0, 'chrA', 200, STRAND.POS, STRAND.POS),
    ]


class TestClassifyStrands:
    def test_matching_strands_are_inversions(self):
        assert classify_strands(STRAND.POS, STRAND.POS) == SVTYPE.INV
        assert classify_strands(STRAND.NEG, STRAND.NEG) == SVTYPE.INV

    def test_deletion(self):
        assert classify_strands(STRAND.POS, STRAND.NEG) == SVTYPE.DEL

    def test_insertion(self):
        assert classify_strands(STRAND.NEG, STRAND.POS) == SVTYPE.INS

    def test_unspecified_strand(self):
        assert classify_strands(STRAND.POS, STRAND.NS) is None
        assert classify_strands(STRAND.NS, STRAND.NEG) is None

    def test_both_unspecified_match(self):
        assert classify_strands(STRAND.NS, STRAND.NS) == SVTYPE.INV


class TestCalculateMedian:
    def test_empty(self):
        assert math.isnan(calculate_median([]))

    def test_odd(self):
        assert calculate_median([5, 1, 3]) == 3

    def test_even_truncates(self):
        assert calculate_median([1, 2]) == 1
        assert calculate_median([4, 1, 3, 2]) == 2

    def test_single(self):
        assert calculate_median([400]) == 400

    def test_order_independent(self):
        values = [7, 3, 9, 1, 12, 3]
        medians = {calculate_median(list(p)) for p in itertools.permutations(values)}
        assert medians == {5}


class TestCalculateMean:
    def test_no_records(self):
        assert math.isnan(calculate_mean(0, 0))

    def test_truncates(self):
        assert calculate_mean(10, 3) == 3
        assert calculate_mean(600, 3) == 200


class TestHistogram:
    def test_empty(self):
        hist = Histogram([])
        assert hist.min_val == 0
        assert hist.max_val == 0
        assert hist.bin_width == 0
        assert hist.bin_counts == (0,) * 10

    def test_single_value(self):
        hist = Histogram([400])
        assert hist.min_val == 400
        assert hist.bin_width == 0
        assert sum(hist.bin_counts) == 0

    def test_range_narrower_than_bin_count(self):
        hist = Histogram([1, 5, 9])
        assert hist.bin_width == 0
        assert hist.bin_counts == (0,) * 10

    def test_max_value_in_last_bin(self):
        hist = Histogram(range(0, 101, 10))
        assert hist.bin_width == 10
        assert hist.bin_counts == (1, 1, 1, 1, 1, 1, 1, 1, 1, 2)

    def test_truncated_width_clamps_to_last_bin(self):
        hist = Histogram([0, 19])
        assert hist.bin_width == 1
        assert hist.bin_counts == (1, 0, 0, 0, 0, 0, 0, 0, 0, 1)

    def test_counts_sum_to_input_length(self):
        values = [3, 17, 250, 251, 999, 1000, 40, 41, 42, 600, 77]
        hist = Histogram(values)
        assert len(hist.bin_counts) == 10
        assert sum(hist.bin_counts) == len(values)

    def test_custom_bin_count(self):
        hist = Histogram([0, 10, 20, 30], bin_count=3)
        assert hist.bin_width == 10
        assert hist.bin_counts == (1, 1, 2)

    def test_to_dict_order(self):
        assert list(Histogram([1, 2]).to_dict().keys()) == [
            REPORT_KEY.MIN_VAL,
            REPORT_KEY.BIN_WIDTH,
            REPORT_KEY.BIN_COUNTS,
        ]


class TestSummaryAccumulator:
    def test_different_chromosomes(self):
        acc = SummaryAccumulator()
        assert acc.add(record('chr1', 100, 'chr2', 500, STRAND.POS, STRAND.POS)) is None
        assert acc.n_interchrom == 1
        assert acc.n_intrachrom == 0
        assert acc.inversion == 0
        assert acc.distances == []

    def test_same_chromosome(self):
        acc = SummaryAccumulator()
        assert acc.add(record('chr1', 500, 'chr1', 100, STRAND.POS, STRAND.NEG)) == SVTYPE.DEL
        assert acc.n_intrachrom == 1
        assert acc.deletion == 1
        assert acc.distances == [400]
        assert acc.total_distance == 400

    def test_same_start_distance_zero(self):
        acc = SummaryAccumulator()
        acc.add(record('chr1', 100, 'chr1', 100))
        assert acc.distances == [0]

    def test_unrecognized_strands_not_categorized(self):
        acc = SummaryAccumulator()
        acc.add(record('chr1', 100, 'chr1', 200, STRAND.POS, STRAND.NS))
        assert acc.n_intrachrom == 1
        assert acc.inversion + acc.insertion + acc.deletion == 0


class TestSummarize:
    def test_no_records(self):
        summary = summarize([])
        assert summary.inversion == summary.insertion == summary.deletion == 0
        assert summary.n_interchrom == summary.n_intrachrom == 0
        assert math.isnan(summary.mean_length)
        assert math.isnan(summary.median_length)
        assert summary.histogram.min_val == 0
        assert summary.histogram.bin_width == 0
        assert summary.histogram.bin_counts == (0,) * 10

    def test_single_inversion(self):
        summary = summarize([record('chr1', 100, 'chr1', 500, STRAND.POS, STRAND.POS)])
        assert summary.n_intrachrom == 1
        assert summary.inversion == 1
        assert summary.mean_length == 400
        assert summary.median_length == 400
        assert summary.histogram.min_val == 400
        assert summary.histogram.bin_width == 0
        assert sum(summary.histogram.bin_counts) == 0

    def test_one_of_each_type(self, three_types):
        summary = summarize(three_types)
        assert summary.deletion == 1
        assert summary.insertion == 1
        assert summary.inversion == 1
        assert summary.n_intrachrom == 3
        assert summary.median_length == 200
        assert summary.mean_length == 200

    def test_record_order_does_not_matter(self, three_types):
        results = {
            tuple(summarize(p).to_dict().items())[:7] for p in itertools.permutations(three_types)
        }
        assert len(results) == 1

    def test_different_chromosomes_only(self):
        summary = summarize(
            [record('chr1', 1, 'chr2', 5, STRAND.POS, STRAND.NEG), record('chr3', 1, 'chr4', 5)]
        )
        assert summary.n_interchrom == 2
        assert summary.n_intrachrom == 0
        assert math.isnan(summary.mean_length)
        assert math.isnan(summary.median_length)
        assert summary.histogram.bin_counts == (0,) * 10

    def test_invariants(self):
        records = [
            record('chr{}'.format(i % 3), i * 37, 'chr{}'.format(i % 2), i * 11, s1, s2)
            for i, (s1, s2) in enumerate(itertools.product(sorted(STRAND.values()), repeat=2))
        ]
        summary = summarize(records)
        assert summary.n_interchrom + summary.n_intrachrom == len(records)
        assert summary.inversion + summary.insertion + summary.deletion <= summary.n_intrachrom
        assert sum(summary.histogram.bin_counts) in {0, summary.n_intrachrom}

    def test_report_key_order(self, three_types):
        assert list(summarize(three_types).to_dict().keys()) == [
            REPORT_KEY.INVERSION,
            REPORT_KEY.INSERTION,
            REPORT_KEY.DELETION,
            REPORT_KEY.N_INTERCHROM,
            REPORT_KEY.N_INTRACHROM,
            REPORT_KEY.MEAN,
            REPORT_KEY.MEDIAN,
            REPORT_KEY.HISTOGRAM,
        ]


class TestSummarizeFile:
    def test_mixed(self):
        summary = summarize_file(get_data('mixed.bedpe'))
        assert summary.n_intrachrom == 5
        assert summary.n_interchrom == 2
        assert summary.deletion == 1
        assert summary.insertion == 1
        assert summary.inversion == 2
        assert summary.mean_length == 380
        assert summary.median_length == 300
        assert summary.histogram.min_val == 100
        assert summary.histogram.max_val == 1000
        assert summary.histogram.bin_width == 90
        assert summary.histogram.bin_counts == (1, 1, 2, 0, 0, 0, 0, 0, 0, 1)

    def test_empty_file(self):
        assert summarize_file(get_data('empty.bedpe')) is None

    def test_header_only(self):
        summary = summarize_file(get_data('header_only.bedpe'))
        assert summary is not None
        assert summary.n_interchrom + summary.n_intrachrom == 0
        assert math.isnan(summary.mean_length)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            summarize_file(str(tmp_path / 'missing.bedpe'))

    def test_unknown_strands_and_ends_are_counted(self, tmp_path):
        input_file = tmp_path / 'unknown.bedpe'
        input_file.write_text(
            'chr1\t100\t101\tchr1\t500\t501\tsv1\t0\t*\t+\n'
            'chr1\t100\t101\tchr1\t300\t301\tsv2\t0\t+\t\n'
            '.\t-1\t-1\tchr1\t500\t501\tsv3\t0\t.\t+\n'
        )
        summary = summarize_file(str(input_file))
        assert summary.n_intrachrom == 2
        assert summary.n_interchrom == 1
        assert summary.inversion + summary.insertion + summary.deletion == 0
        assert summary.mean_length == 300
