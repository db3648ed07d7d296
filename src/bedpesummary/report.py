"""
Formatting of the summary report. The report is written once, after the whole input has been read
"""
import json
import math
import sys
from typing import IO, Optional

from .constants import REPORT_KEY, REPORT_STYLE
from .summary import BedpeSummary


def format_value(value) -> str:
    if isinstance(value, float) and math.isnan(value):
        return 'NaN'
    return json.dumps(value)


def format_json(summary: BedpeSummary) -> str:
    return json.dumps(summary.to_dict(), indent='  ')


def format_legacy(summary: BedpeSummary) -> str:
    """
    the line layout of the bedtools bedpesummary report
    """
    report = summary.to_dict()
    hist = report[REPORT_KEY.HISTOGRAM]

    def pair(key, value):
        return f'"{key}" : {format_value(value)}'

    lines = [
        '{'
        + ', '.join(
            [pair(k, report[k]) for k in [REPORT_KEY.INVERSION, REPORT_KEY.INSERTION, REPORT_KEY.DELETION]]
        )
        + ', ',
        ', '.join(
            [pair(k, report[k]) for k in [REPORT_KEY.N_INTERCHROM, REPORT_KEY.N_INTRACHROM, REPORT_KEY.MEAN]]
        )
        + ', ',
        pair(REPORT_KEY.MEDIAN, report[REPORT_KEY.MEDIAN]) + ', ',
        '"{}" : {{ {}, {}, "{}": ['.format(
            REPORT_KEY.HISTOGRAM,
            pair(REPORT_KEY.MIN_VAL, hist[REPORT_KEY.MIN_VAL]),
            pair(REPORT_KEY.BIN_WIDTH, hist[REPORT_KEY.BIN_WIDTH]),
            REPORT_KEY.BIN_COUNTS,
        ),
        ', '.join([str(c) for c in hist[REPORT_KEY.BIN_COUNTS]]) + ']}}',
    ]
    return '\n'.join(lines)


FORMATTERS = {REPORT_STYLE.JSON: format_json, REPORT_STYLE.LEGACY: format_legacy}


def write_report(
    summary: BedpeSummary, style: str = REPORT_STYLE.JSON, fh: Optional[IO[str]] = None
) -> None:
    """
    Args:
        summary: the statistics to report
        style: the layout of the report
        fh: where to write the report, defaults to standard output
    """
    formatter = FORMATTERS[style]
    text = formatter(summary)
    if fh is None:
        fh = sys.stdout
    fh.write(text + '\n')
    fh.flush()
