#!/usr/bin/env python3

import sys
import argparse

from .common import TRACE, RpnError, SourceUnavailableError
from .driver import open_source, run
from .evaluator import Evaluator

PROG = 'rpncalc'
VERSION = '1.0.0'
AUTHOR = 'Taketoshi Kazusa'
DESCRIPTION = 'Super awesome sample RPN calculator'

EXIT_OK = 0
EXIT_EVAL_ERROR = 1
EXIT_SOURCE_UNAVAILABLE = 3


def report(result):
    e = result.error
    print(f'Error: line {result.lineno}: {e.kind}: {e} ({result.line!r})', file=sys.stderr)


def evaluate_lines(lines, evaluator, args):
    status = EXIT_OK

    def show_tokens(lineno, line):
        print(evaluator.tokenize(line))

    before = show_tokens if args.tokens else None

    for result in run(lines, evaluator, keep_going=args.keep_going, before=before):
        if result.ok:
            print(result.value)
        else:
            report(result)
            status = EXIT_EVAL_ERROR

    return status


def _main(args):
    evaluator = Evaluator(verbose=args.verbose, width=args.width)

    if args.verbose:
        if args.expression:
            print(f'Expressions given: {len(args.expression)}', file=sys.stderr)
        elif args.formula_file is not None:
            print(f'File specified: {args.formula_file}', file=sys.stderr)
        else:
            print('No file specified, reading standard input.', file=sys.stderr)
        print(f'Is verbosity specified?: {args.verbose}', file=sys.stderr)

    if args.expression:
        return evaluate_lines(args.expression, evaluator, args)

    with open_source(args.formula_file) as lines:
        return evaluate_lines(lines, evaluator, args)


def make_parser():
    argp = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=f'{PROG} {VERSION} by {AUTHOR}. Each input line is one expression; '
               'the run halts on the first failing line unless --keep-going is given.',
    )
    argp.add_argument('formula_file', nargs='?', help='file of RPN formulas, one per line (default: stdin)')
    argp.add_argument('-e', '--expression', action='append', metavar='EXPR',
                      help='evaluate EXPR instead of reading a file or stdin (repeatable)')
    argp.add_argument('-v', '--verbose', action='store_true', help='trace tokens and stack after each token')
    argp.add_argument('-k', '--keep-going', action='store_true', help='continue after a failing line')
    argp.add_argument('--width', type=int, choices=(32, 64), default=32, help='integer bit width (default: 32)')
    argp.add_argument('--tokens', action='store_true', help='print the tokens of each line')
    argp.add_argument('--version', action='version', version=f'{PROG} {VERSION}')
    return argp


def main(argv=None):
    args = make_parser().parse_args(argv)

    try:
        return _main(args)
    except RpnError as e:
        if TRACE:
            import traceback

            traceback.print_exception(e)
        else:
            print(f'Error: {e.kind}: {e}', file=sys.stderr)

        if isinstance(e, SourceUnavailableError):
            return EXIT_SOURCE_UNAVAILABLE
        return EXIT_EVAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
