"""
Command-line interface for valsi.

- parse: parse and validate one text, print the tree
- check: validate a file line by line and summarize
- info:  show which wordlists are in use
"""
import sys
import json
import argparse
import logging

from .errors import LojbanParseError
from .logging_config import ProgressLogger, setup_logging

logger = logging.getLogger(__name__)


def _read_input(args):
    if args.text:
        return args.text
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read().strip()
    print("Enter Lojban text:")
    return input().strip()


def cmd_parse(args):
    """Parse Lojban text and print its tree."""
    from .parser import parse_lojban

    text = _read_input(args)
    try:
        tree = parse_lojban(text)
    except LojbanParseError as e:
        if args.format == 'json':
            print(json.dumps({"error": e.to_dict()}, indent=2, ensure_ascii=False))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(json.dumps(tree.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(tree.pretty())
        print(f"\nWords: {' '.join(tree.words())}")
    return 0


def cmd_check(args):
    """Validate every non-blank line of a file."""
    from .parser import parse_many
    from .wordlists import get_wordlists

    try:
        wordlists = get_wordlists()
        with open(args.file, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except (OSError, LojbanParseError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    progress = ProgressLogger(total=len(lines), desc=f"Checking {args.file}", logger=logger)
    results = parse_many(lines, wordlists, progress=progress)
    progress.close()

    failures = [r for r in results if not r.ok]
    valid = len(results) - len(failures)
    rate = valid / len(results) if results else 0.0

    print(f"File: {args.file}")
    print(f"Lines checked: {len(results)}")
    print(f"Valid: {valid} ({rate:.1%})")

    if failures:
        print("\nErrors:")
        for result in failures:
            print(f"  line {result.line_num}: [{result.error.kind}] {result.error.message}")
        return 1
    return 0


def cmd_info(args):
    """Display wordlist information."""
    from .wordlists import get_default_store

    store = get_default_store()
    config = store.config

    print("=== valsi wordlists ===\n")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Directory: {config.directory}")
    try:
        wordlists = store.get()
    except LojbanParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"  cmavo: {len(wordlists.cmavo):>6}  ({config.cmavo_path})")
    print(f"  gismu: {len(wordlists.gismu):>6}  ({config.gismu_path})")
    print(f"  rafsi: {len(wordlists.rafsi):>6}  ({config.rafsi_path}, not used for validation)")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='valsi',
        description='valsi: Lojban parser with cmavo/gismu wordlist validation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  valsi parse "mi klama le zarci"
  valsi parse --file input.txt --format json
  valsi check corpus.txt
  valsi info

Wordlists come from the bundled data unless VALSI_WORDLIST_DIR is set.
        """
    )
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', help='Also append log records to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    parser_parse = subparsers.add_parser('parse', help='Parse and validate Lojban text')
    parser_parse.add_argument('text', nargs='?', help='Lojban text to parse')
    parser_parse.add_argument('-f', '--file', help='Read input from file')
    parser_parse.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_parse.set_defaults(func=cmd_parse)

    parser_check = subparsers.add_parser('check', help='Validate a file line by line')
    parser_check.add_argument('file', help='Path to a text file, one text per line')
    parser_check.set_defaults(func=cmd_check)

    parser_info = subparsers.add_parser('info', help='Display wordlist information')
    parser_info.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(log_file=args.log_file, level=logging.WARNING, debug=args.debug)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
