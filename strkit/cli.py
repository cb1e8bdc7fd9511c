#!/usr/bin/env python3
"""
strkit - String helper CLI

Runs the strkit helpers from the shell. Defaults for truncation and digit
grouping come from the YAML configuration (see strkit/config/default.yaml).

Usage:
    strkit capitalize "  hello world"         # Hello world
    strkit digits "abc123def"                 # 123
    strkit expiry 01/30                       # valid
    strkit truncate "Hello World" --limit 5   # Hello...
    strkit group 123456789 --format international
"""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

import yaml

from strkit.card_expiry import validate_card_expiry
from strkit.config import (
    DigitSettings,
    TruncateSettings,
    get_digit_settings,
    get_truncate_settings,
    get_typed_value,
    load_config,
)
from strkit.digit_grouping import DigitFormat, group_digits
from strkit.errors import StringHelperError
from strkit.string_utils import capitalize_first, extract_digits, truncate_with_ellipsis


logger = logging.getLogger(__name__)


def setup_logging(logging_config: Dict[str, Any], verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        logging_config: Logging configuration dictionary.
        verbose: Force DEBUG level regardless of the configured level.
    """
    log_level = 'DEBUG' if verbose else logging_config.get('level', 'WARNING')
    log_file = logging_config.get('file')
    log_format = logging_config.get(
        'format',
        '%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    date_format = logging_config.get('date_format', '%Y-%m-%d %H:%M:%S')
    formatter = logging.Formatter(log_format, date_format)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(log_level).upper(), logging.WARNING))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries command output, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config.get('max_bytes', 10485760),
            backupCount=logging_config.get('backup_count', 5),
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='strkit',
        description='Small string helpers from the command line',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  strkit capitalize "  hello"                 # Hello
  strkit digits "12.34"                       # 1234
  strkit expiry 12/99                         # valid
  strkit truncate 12345678901234567890        # 1234567890...
  strkit group 0000000                        # 00,00,000
        """
    )
    parser.add_argument('--config', '-c', help='Path to configuration file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command')

    capitalize = subparsers.add_parser('capitalize', help='Uppercase the first letter')
    capitalize.add_argument('text')

    digits = subparsers.add_parser('digits', help='Keep only the digits')
    digits.add_argument('text')

    expiry = subparsers.add_parser('expiry', help='Validate an MM/YY card expiry')
    expiry.add_argument('expiry')

    truncate = subparsers.add_parser('truncate', help='Truncate text with an ellipsis')
    truncate.add_argument('text')
    truncate.add_argument('--limit', '-n', type=int,
                          help='Characters to keep (default: truncate.max_length)')

    group = subparsers.add_parser('group', help='Group digits with separators')
    group.add_argument('digits')
    group.add_argument('--format', '-f', dest='fmt',
                       choices=[fmt.value for fmt in DigitFormat],
                       help='Grouping style (default: digits.format)')
    group.add_argument('--separator', '-s',
                       help='Group separator (default: digits.separator)')

    return parser


def run_command(
    args: argparse.Namespace,
    truncate_settings: TruncateSettings,
    digit_settings: DigitSettings,
) -> int:
    """Execute one parsed subcommand and print its result.

    Returns:
        Exit code.
    """
    if args.command == 'capitalize':
        print(capitalize_first(args.text))
    elif args.command == 'digits':
        print(extract_digits(args.text))
    elif args.command == 'expiry':
        result = validate_card_expiry(args.expiry)
        if not result.status:
            print(f"invalid: {result.error}")
            return 1
        print("valid")
    elif args.command == 'truncate':
        limit = args.limit
        if limit is None:
            limit = truncate_settings.max_length
        print(truncate_with_ellipsis(args.text, limit))
    elif args.command == 'group':
        fmt = args.fmt or digit_settings.format
        separator = args.separator
        if separator is None:
            separator = digit_settings.separator
        print(group_digits(args.digits, fmt, separator=separator))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the strkit command.

    Returns:
        Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        truncate_settings = get_truncate_settings(config)
        digit_settings = get_digit_settings(config)
        logging_config = get_typed_value(config, 'logging', (dict, type(None)), None) or {}
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: could not load configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(logging_config, verbose=args.verbose)
    logger.debug(f"Running {args.command} with config {args.config or 'default'}")

    try:
        return run_command(args, truncate_settings, digit_settings)
    except StringHelperError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
