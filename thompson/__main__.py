#!/usr/bin/env python3

import logging
from argparse import ArgumentParser
from os.path import isfile
import sys
from sys import exit as sys_exit
from .compile import compile
from .pattern import parse
from .tokens import tokens_to_str

parser = ArgumentParser(prog="thompson")
parser.add_argument("regexp", help="Pattern to compile")
parser.add_argument("strings", nargs="*", help="Strings to test, read from stdin when none are given")
parser.add_argument("-f", "--file", dest="files", action="append", default=[],
                    help="Test each line of the file")
parser.add_argument("-a", "--alphabet", default=None,
                    help="Reject patterns using other characters than these ones")
parser.add_argument("-q", "--quiet", dest="quiet", action="store_const", const=True, default=False,
                    help="Don't output results, only set the exit status")
parser.add_argument("-s", "--steps", dest="steps", action="store_const", const=True, default=False,
                    help="Output the active states after each character")
parser.add_argument("-v", "--verbose", dest="verbose", action="store_const", const=True, default=False,
                    help="Debug mode, print generated automaton")


def format_ids(ids):
    return "{%s}" % ", ".join(map(str, sorted(ids)))


def read_strings(args):
    yield from args.strings
    for filepath in filter(isfile, args.files):
        with open(filepath) as fd:
            for line in fd:
                yield line.rstrip("\n")
    if not args.strings and not args.files:
        for line in sys.stdin:
            yield line.rstrip("\n")


def main(argv=None):
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    automaton = compile(args.regexp, args.alphabet)
    if not automaton:
        print("{}: {}".format(parser.prog, automaton.reason), file=sys.stderr)
        return 2

    if args.verbose:
        print(tokens_to_str(parse(args.regexp)))
        automaton.print_mesh()
        print()

    found = False
    for string in read_strings(args):
        if args.steps:
            for index, step in enumerate(automaton.steps(string)):
                if not args.quiet:
                    print(string[:index], format_ids(step.active_state_ids), sep="\t")
        simulation = automaton.simulate(string)
        found |= simulation.is_match
        if not args.quiet:
            print(string, "match" if simulation else "nomatch",
                  format_ids(simulation.active_state_ids), sep="\t")

    return 0 if found else 1


if __name__ == "__main__":
    sys_exit(main())
