# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

"""
``ratgrid`` evaluates exact rational number expressions on the command line.

Usage examples::

    ratgrid 117/1098             # prints the reduced form: 13/122
    ratgrid 1/2 + 1/3            # prints 5/6
    ratgrid 1/2 '<' 2/3          # prints true
    ratgrid --in 1/3 2/3 1/2     # prints true, as 1/3 <= 1/2 <= 2/3
    ratgrid --demo               # runs a set of self checks

Values are written as "n/d" or "n". Negative values must follow a ``--``
separator, e.g. ``ratgrid -- -1/2 - 1/3``, as they would otherwise be taken
as options. Remember to quote operators that are special to your shell.
"""

import argparse
import logging
import operator
from importlib.metadata import version, PackageNotFoundError

from .rational import parse_rational, div_by, in_range, ParseError, DivisionByZero

log = logging.getLogger(__name__)

arithmetic_operators = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
}

comparison_operators = {
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge,
    '==': operator.eq,
    '!=': operator.ne,
}

def installed_version() -> str:
    try:
        return version("ratgrid")
    except PackageNotFoundError:
        return 'unknown'

def fmt_bool(value: bool) -> str:
    return 'true' if value else 'false'

def demo() -> list[bool]:
    """Runs the self checks printed by ``ratgrid --demo``. All should be True."""
    half = div_by(1, 2)
    third = div_by(1, 3)
    two_thirds = div_by(2, 3)
    return [
        half + third == div_by(5, 6),
        half - third == div_by(1, 6),
        half * third == div_by(1, 6),
        half / third == div_by(3, 2),
        -half == div_by(-1, 2),
        str(div_by(2, 1)) == "2",
        str(div_by(-2, 4)) == "-1/2",
        str(parse_rational("117/1098")) == "13/122",
        half < two_thirds,
        half in third.rangeto(two_thirds),
        div_by(2000000000, 4000000000) == half,
        div_by(912016490186296920119201192141970416029,
            1824032980372593840238402384283940832058) == half,
    ]

def evaluate(values: list[str]) -> str:
    """Evaluates "VALUE" or "LEFT OP RIGHT" and returns the printable result."""
    if len(values) == 1:
        result = parse_rational(values[0])
        log.debug("parsed %r as %r", values[0], result)
        return str(result)

    left_str, op, right_str = values
    left = parse_rational(left_str)
    right = parse_rational(right_str)
    log.debug("evaluating %r %s %r", left, op, right)
    if op in arithmetic_operators:
        return str(arithmetic_operators[op](left, right))
    else:
        return fmt_bool(comparison_operators[op](left, right))

def main(argv=None):
    parser = argparse.ArgumentParser(prog='ratgrid',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('values', nargs='*', metavar='VALUE', help="VALUE, or LEFT OP RIGHT, or LO HI VALUE with --in.")
    parser.add_argument('--in', dest='in_range', action='store_true', help="Check whether the third value lies in the closed range [LO, HI].")
    parser.add_argument('--demo', action='store_true', help="Run self checks and print one true/false line per check.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {installed_version()}')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    if args.demo:
        if args.values or args.in_range:
            parser.error("--demo takes no further arguments.")
        for ok in demo():
            print(fmt_bool(ok))
        return

    try:
        if args.in_range:
            if len(args.values) != 3:
                parser.error("--in requires exactly three values: LO HI VALUE.")
            lo, hi, value = (parse_rational(v) for v in args.values)
            log.debug("checking %r in [%r, %r]", value, lo, hi)
            print(fmt_bool(in_range(value, lo, hi)))
        elif len(args.values) == 1:
            print(evaluate(args.values))
        elif len(args.values) == 3:
            op = args.values[1]
            if op not in arithmetic_operators and op not in comparison_operators:
                parser.error(f"unknown operator {op!r}.")
            print(evaluate(args.values))
        else:
            parser.error("expected VALUE or LEFT OP RIGHT.")
    except (ParseError, DivisionByZero) as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")
