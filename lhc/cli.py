from typing import List, Optional
import argparse
import logging
import os
import sys
from pathlib import Path

from lhc import VERSION
from lhc.messages import error

##################################################################################################
# Main
##################################################################################################

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        usage='%(prog)s [OPTIONS] [FILE]...',
        description='Compare FILE with an expected license header.')

    parser.add_argument('patterns', type=str, nargs='*', metavar='FILE',
                        help='Glob patterns of files to check, matched in every directory.')
    parser.add_argument('-directory', '--directory', type=str, default='.',
                        help='Directory to search for files.')
    parser.add_argument('-disable-spdx', '--disable-spdx', action='store_true',
                        help='Do not verify that the SPDX identifier matches the license.')
    parser.add_argument('-exclude', '--exclude', type=str, default='',
                        help="Comma-separated list of paths to exclude. The code will search for "
                             "paths containing this pattern. For example '/yang/gen/' is "
                             "'**/yang/gen/**'.")
    parser.add_argument('-license', '--license', type=str, default='license.txt',
                        help='Comma-separated list of license files or names to compare against.')
    parser.add_argument('-verbose', '--verbose', action='store_true',
                        help='Print the reason each failing file failed.')
    parser.add_argument('-version', '--version', action='store_true',
                        help='Print version')
    return parser


def split_list(value: str) -> List[str]:
    return [v for v in value.split(',') if v]


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(message)s')

    args = build_parser().parse_args(argv)

    if args.version:
        print("License Checker version", VERSION)
        return 0

    if args.verbose:
        # enable DEBUG logging
        logging.getLogger().setLevel(logging.DEBUG)

    from lhc.tasks.check import check_main
    try:
        return check_main(
            Path(args.directory),
            args.patterns,
            split_list(args.license),
            disable_spdx=args.disable_spdx,
            excludes=split_list(args.exclude),
            verbose=args.verbose)
    except OSError as e:
        error(str(e))
        return 1


def run() -> None:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    sys.exit(main())
