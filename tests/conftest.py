# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

from ratgrid.rational import Rational

def pytest_assertrepr_compare(op, left, right):
    if isinstance(left, Rational) and isinstance(right, Rational) and op == "==":
        ret = [f"{left!r} == {right!r}"]
        if left.numerator != right.numerator:
            ret.append(f"\tnumerator: {left.numerator} != {right.numerator}")
        if left.denominator != right.denominator:
            ret.append(f"\tdenominator: {left.denominator} != {right.denominator}")
        return ret
