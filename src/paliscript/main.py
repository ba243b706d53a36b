#!/usr/bin/env python3
"""
Pali script converter
Command line interface for conversion and codec validation
"""

import argparse
import logging
import os
import sys

from paliscript.conversion.book import convert_book
from paliscript.conversion.converter import convert
from paliscript.conversion.scripts import Script
from paliscript.validation.reference import SanscriptReference
from paliscript.validation.round_trip import RoundTripValidator, analyze_word
from paliscript.validation.syllable_extractor import SyllableExtractor, words_from_text

SCRIPT_NAMES = [script.value for script in Script]


def setup_logging(level=logging.WARNING):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _scripts(names):
    if not names:
        return None
    return [Script.parse(name) for name in names]


def _read(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def build_parser():
    parser = argparse.ArgumentParser(
        prog='paliscript',
        description="Convert Pali text between scripts and validate the converters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a word
  paliscript convert "बुद्ध" --from devanagari --to thai

  # Convert a Devanagari book
  paliscript book s0101m.mul.xml --to latin --output s0101m.mul.latn.xml

  # Round-trip check a word list
  paliscript validate --input-file words.txt --scripts thai khmer
        """
    )
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    commands = parser.add_subparsers(dest='command', required=True)

    p = commands.add_parser('convert', help='Convert text')
    p.add_argument('text', type=str, help='Text to convert')
    p.add_argument('--from', dest='source', default='unknown', choices=SCRIPT_NAMES,
                   help='Source script (unknown detects it per character)')
    p.add_argument('--to', dest='target', required=True, choices=SCRIPT_NAMES,
                   help='Target script')
    p.add_argument('--title-case', action='store_true',
                   help='Capitalise the first letter of each word')

    p = commands.add_parser('book', help='Convert a Devanagari XML book')
    p.add_argument('input_file', type=str, help='Devanagari book')
    p.add_argument('--to', dest='target', required=True, choices=SCRIPT_NAMES,
                   help='Target script')
    p.add_argument('--output', type=str, help='Output file (default: stdout)')

    p = commands.add_parser('validate', help='Round-trip check Devanagari words')
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument('--words', nargs='+', help='Words to check')
    group.add_argument('--input_file', '--input-file', type=str,
                       help='File of words (any whitespace separated)')
    p.add_argument('--scripts', nargs='+', choices=SCRIPT_NAMES,
                   help='Scripts to check (default: all)')
    p.add_argument('--no-localize', action='store_true',
                   help='Skip searching for the failing syllables')

    p = commands.add_parser('analyze', help='Show every round trip of one word')
    p.add_argument('word', type=str)
    p.add_argument('--scripts', nargs='+', choices=SCRIPT_NAMES)

    p = commands.add_parser('extract', help='Pick words covering all syllables')
    p.add_argument('--input_file', '--input-file', type=str, required=True,
                   help='Text or XML file of Devanagari words')
    p.add_argument('--output', type=str, help='Selected words (default: stdout)')
    p.add_argument('--csv', type=str, help='Syllable statistics file')

    p = commands.add_parser('compare', help='Compare with indic_transliteration')
    p.add_argument('word', type=str)
    p.add_argument('--scripts', nargs='+', choices=SCRIPT_NAMES)

    return parser


def run_convert(args):
    print(convert(args.text, Script.parse(args.source), Script.parse(args.target),
                  title_case=args.title_case))
    return 0


def run_book(args):
    result = convert_book(_read(args.input_file), Script.parse(args.target))
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(result)
        print(f"Book saved to: {args.output}")
    else:
        print(result)
    return 0


def run_validate(args):
    words = args.words if args.words else _read(args.input_file).split()
    validator = RoundTripValidator(_scripts(args.scripts), localize=not args.no_localize)
    batch = validator.validate_batch(words)

    for report in batch.failures:
        print(f"FAIL {report.word}")
        for script in report.failed_scripts:
            result = report.results[script]
            line = f"  {script.value:10s} {result.target1} -> {result.latin2}"
            if script in report.minimal_failures:
                line += f"  (fails on {report.minimal_failures[script]})"
            print(line)

    print(f"\nWords checked: {len(batch.reports)}")
    for script, stats in batch.stats.items():
        print(f"  {script.value:10s} {stats.passed:6d}/{stats.total:<6d} {stats.success_rate:7.2%}")
    return 0 if batch.passed else 1


def run_analyze(args):
    report = analyze_word(args.word, _scripts(args.scripts))
    print(f"Word: {report.word}")
    for script, result in report.results.items():
        status = 'ok' if result.passed else 'FAIL'
        print(f"  {script.value:10s} {status:4s} {result.target1}  {result.latin1} / {result.latin2}")
    if report.syllables:
        print(f"Syllables: {' '.join(report.syllables)}")
    for script, piece in report.minimal_failures.items():
        print(f"  {script.value}: smallest failing piece {piece}")
    return 0 if report.passed else 1


def run_extract(args):
    if not os.path.exists(args.input_file):
        print(f"Input file not found: {args.input_file}")
        return 1
    extractor = SyllableExtractor()
    selected = extractor.select(words_from_text(_read(args.input_file)),
                                os.path.basename(args.input_file))
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(' '.join(selected))
        print(f"Wrote {len(selected)} words to: {args.output}")
    else:
        print(' '.join(selected))
    if args.csv:
        extractor.write_csv(args.csv)
        print(f"Wrote {len(extractor.stats)} syllables to: {args.csv}")
    return 0


def run_compare(args):
    reference = SanscriptReference()
    differences = 0
    for result in reference.compare_all(args.word, _scripts(args.scripts)):
        mark = '=' if result.agrees else '!'
        print(f"  {result.script.value:10s} {mark} {result.ours}  {result.reference}")
        differences += not result.agrees
    return 0 if differences == 0 else 1


COMMANDS = {
    'convert': run_convert,
    'book': run_book,
    'validate': run_validate,
    'analyze': run_analyze,
    'extract': run_extract,
    'compare': run_compare,
}


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        return COMMANDS[args.command](args)
    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
