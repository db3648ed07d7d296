#!python
import argparse
import logging
import platform
import sys
import time
from typing import List, Optional

from . import __version__
from . import util as _util
from .config import CustomHelpFormatter
from .constants import EXIT_OK, PROGNAME, REPORT_STYLE, STDIN
from .report import write_report
from .summary import summarize_file
from .util import filepath

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING']


def create_parser(argv):
    parser = argparse.ArgumentParser(
        prog=PROGNAME,
        description='Summarises a BEDPE file: structural variant type counts, same and different '
        'chromosome counts, and the distribution of same chromosome distances',
        formatter_class=CustomHelpFormatter,
        add_help=False,
    )
    optional = parser.add_argument_group('optional arguments')
    optional.add_argument('-h', '--help', action='help', help='show this help message and exit')
    optional.add_argument(
        '-v',
        '--version',
        action='version',
        version='%(prog)s version ' + __version__,
        help='Outputs the version number',
    )
    optional.add_argument(
        '-i',
        '--input',
        type=filepath,
        default=STDIN,
        help='path to the input BEDPE file',
    )
    style = optional.add_argument(
        '--style',
        choices=sorted(REPORT_STYLE.values()),
        default=_util.get_env_variable('style', REPORT_STYLE.JSON, cast_type=str.lower),
        help='layout of the report written to stdout',
    )
    optional.add_argument('--log', help='redirect logging to a log file', default=None)
    log_level = optional.add_argument(
        '--log_level',
        help='level of logging to output',
        choices=LOG_LEVELS,
        default=_util.get_env_variable('log_level', 'INFO', cast_type=str.upper),
    )
    args = parser.parse_args(argv)

    # defaults from the environment are not checked against the choices by argparse
    for action in [style, log_level]:
        if getattr(args, action.dest) not in action.choices:
            parser.error(
                'argument {}: invalid choice: {!r} (choose from {})'.format(
                    '/'.join(action.option_strings),
                    getattr(args, action.dest),
                    ', '.join(action.choices),
                )
            )
    return parser, args


def main(argv: Optional[List[str]] = None):
    """
    parses the command line arguments, summarises the input file and writes the report to stdout

    Args:
        argv: List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())
    parser, args = create_parser(argv)

    log_conf = {
        'format': '{asctime} [{levelname}] {message}',
        'style': '{',
        'level': args.log_level,
    }

    original_logging_handlers = logging.root.handlers[:]
    for handler in original_logging_handlers:
        logging.root.removeHandler(handler)
    if args.log:
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.logger.info(f'{PROGNAME}: {__version__}')
    _util.logger.info(f'hostname: {platform.node()}')
    _util.log_arguments(args)

    try:
        summary = summarize_file(args.input)
        if summary is not None:
            write_report(summary, args.style)

        duration = int(time.time()) - start_time
        _util.logger.info(f'run time (s): {duration}')
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
            handler.close()
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
