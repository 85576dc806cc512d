"""CLI Argument Parsing"""

import argparse
from typing import Optional, Sequence

import argcomplete


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='claude-commit',
        description='Generate git commit messages using Claude API based on git changes',
        epilog='Example: claude-commit --verbose',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Print verbose output (diff sent to Claude, debug logs)')
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
