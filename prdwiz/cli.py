#!/usr/bin/env python3
"""PRD wizard CLI entrypoint."""

import sys
import argparse
import logging

from prdwiz.commands import create as cmd_create_module
from prdwiz.commands import exists as cmd_exists_module

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def cmd_create(args):
    return cmd_create_module.cmd_create(args)


def cmd_exists(args):
    return cmd_exists_module.cmd_exists(args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='prd', description='Product Requirements Document wizard')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # prd create
    p_create = subparsers.add_parser('create', help='Create a PRD interactively')
    p_create.add_argument('--cwd', help='Working directory (default: current directory)')
    p_create.add_argument('--output-dir', '-o', help='Output directory (default: ./tasks)')
    p_create.add_argument('--force', '-f', action='store_true', help='Overwrite an existing PRD without asking')
    p_create.set_defaults(func=cmd_create)

    # prd exists
    p_exists = subparsers.add_parser('exists', help='Check whether a PRD exists for a feature')
    p_exists.add_argument('feature', help='Feature name or description')
    p_exists.add_argument('--cwd', help='Working directory (default: current directory)')
    p_exists.add_argument('--output-dir', '-o', help='Output directory (default: ./tasks)')
    p_exists.set_defaults(func=cmd_exists)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
