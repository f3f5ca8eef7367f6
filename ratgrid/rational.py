# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

"""
Exact rational numbers on top of Python's arbitrary-precision integers.

A :class:`Rational` is an immutable pair (numerator, denominator) which is
always kept in reduced form:

- the denominator is never zero,
- gcd(numerator, denominator) == 1,
- the denominator is positive (the sign lives in the numerator),
- zero is represented as 0/1.

Every operation returns a new, freshly normalized instance.
"""

import re
import math
import numbers
import fractions
from enum import Enum
from public import public

@public
class DivisionByZero(ZeroDivisionError):
    """Raised for a zero denominator or a division by a zero-valued operand."""

@public
class ParseError(ValueError):
    """Raised when a text is not a valid rational number literal."""

@public
class Ordering(Enum):
    """Result of :func:`compare`."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def __repr__(self):
        return f'{self.__class__.__name__}.{self.name}'

def check_integer(value, name) -> int:
    """Returns value as int. Raises TypeError for anything but an integer."""
    # bool is Integral, but is not accepted as a number here.
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}.")
    return int(value)

# int <-> str conversion is done in chunks of this many digits, staying below
# sys.get_int_max_str_digits() (which cannot be set below 640).
_chunk_digits = 500
_chunk_base = 10**_chunk_digits

def int_to_str(n: int) -> str:
    """str(n) for integers of any length."""
    if n < 0:
        return "-" + int_to_str(-n)
    if n < _chunk_base:
        return str(n)
    chunks = []
    while n:
        n, rem = divmod(n, _chunk_base)
        chunks.append(rem)
    head = str(chunks.pop())
    return head + "".join(f"{chunk:0{_chunk_digits}d}" for chunk in reversed(chunks))

def digits_to_int(digits: str) -> int:
    """int(digits) for ASCII digit strings of any length."""
    n = 0
    for k in range(0, len(digits), _chunk_digits):
        chunk = digits[k:k + _chunk_digits]
        n = n * 10**len(chunk) + int(chunk)
    return n

def _coerce(other):
    """Returns other as Rational, or None if it is not a supported operand."""
    if isinstance(other, Rational):
        return other
    if isinstance(other, numbers.Integral) and not isinstance(other, bool):
        return Rational(int(other))
    return None

def _unordered(other):
    # Plain tuples would otherwise be compared lexicographically.
    if isinstance(other, tuple):
        raise TypeError(f"Cannot order Rational and {type(other).__name__}.")
    return NotImplemented

def _not_addable(other):
    # Plain tuples would otherwise be concatenated.
    if isinstance(other, tuple):
        raise TypeError(f"unsupported operand type(s) for +: 'Rational' and '{type(other).__name__}'")
    return NotImplemented

@public
class Rational(tuple):
    """
    Immutable rational number numerator/denominator in reduced form.

    - ``Rational(n, d)`` normalizes n/d and raises :class:`DivisionByZero`
      if d is zero.
    - ``Rational(n)`` is n/1.
    - ``Rational("n/d")`` and ``Rational("n")`` parse the text using
      :func:`parse_rational`.

    Supports ``+``, ``-``, ``*``, ``/`` (also with plain int operands), unary
    ``-``, and comparisons between Rational instances. str() yields "n" for
    integers and "n/d" otherwise; repr() yields "R('n/d')".
    """

    __slots__ = ()

    def __new__(cls, numerator=0, denominator=None):
        if denominator is None:
            if isinstance(numerator, Rational):
                return tuple.__new__(cls, numerator)
            if isinstance(numerator, str):
                return cls.parse(numerator)
            denominator = 1
        numerator = check_integer(numerator, "numerator")
        denominator = check_integer(denominator, "denominator")
        if denominator == 0:
            raise DivisionByZero(f"Denominator of {int_to_str(numerator)}/0 is zero.")

        g = math.gcd(numerator, denominator) # never 0 here, gcd(0, d) == |d|
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        return tuple.__new__(cls, (numerator, denominator))

    def __getnewargs__(self):
        # Required for pickle / copy, as tuple's default passes a single tuple.
        return self.numerator, self.denominator

    @classmethod
    def parse(cls, text: str) -> 'Rational':
        """Same as :func:`parse_rational`, returning an instance of cls."""
        num, den = _split_literal(text)
        return cls(num, den)

    @property
    def numerator(self) -> int:
        return self[0]

    @property
    def denominator(self) -> int:
        """Always positive."""
        return self[1]

    def is_integer(self) -> bool:
        return self.denominator == 1

    # Arithmetic
    # ----------

    def __add__(self, other):
        value = _coerce(other)
        if value is None:
            return _not_addable(other)
        return type(self)(
            self.numerator * value.denominator + value.numerator * self.denominator,
            self.denominator * value.denominator,
        )

    def __radd__(self, other):
        if _coerce(other) is None:
            return _not_addable(other)
        return self + other

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if other.numerator == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero.")
        return type(self)(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self):
        return type(self)(-self.numerator, self.denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)(abs(self.numerator), self.denominator)

    def __bool__(self):
        return self.numerator != 0

    # Comparison
    # ----------

    def compare(self, other: 'Rational') -> Ordering:
        """
        Orders self and other by cross-multiplication. Both denominators are
        positive, so no common denominator has to be computed.
        """
        if not isinstance(other, Rational):
            raise TypeError(f"Cannot compare Rational with {type(other).__name__}.")
        lhs = self.numerator * other.denominator
        rhs = other.numerator * self.denominator
        if lhs < rhs:
            return Ordering.LESS
        elif lhs > rhs:
            return Ordering.GREATER
        else:
            return Ordering.EQUAL

    def __eq__(self, other):
        if not isinstance(other, Rational):
            # Plain tuples must not reach tuple.__eq__.
            return False if isinstance(other, tuple) else NotImplemented
        # Reduced form is unique, so structural equality is value equality.
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        if not isinstance(other, Rational):
            return True if isinstance(other, tuple) else NotImplemented
        return tuple.__ne__(self, other)

    __hash__ = tuple.__hash__

    def __lt__(self, other):
        if not isinstance(other, Rational):
            return _unordered(other)
        return self.compare(other) is Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, Rational):
            return _unordered(other)
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, Rational):
            return _unordered(other)
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, Rational):
            return _unordered(other)
        return self.compare(other) is not Ordering.LESS

    def rangeto(self, end: 'Rational') -> 'RationalRange':
        """Returns the closed range [self, end]."""
        return RationalRange(self, end)

    # Conversion
    # ----------

    def __str__(self):
        if self.is_integer():
            return int_to_str(self.numerator)
        return f"{int_to_str(self.numerator)}/{int_to_str(self.denominator)}"

    def __repr__(self):
        return f"R('{self}')"

    def __float__(self):
        return self.numerator / self.denominator

    def to_fraction(self) -> fractions.Fraction:
        """Returns the equal :class:`fractions.Fraction`."""
        return fractions.Fraction(self.numerator, self.denominator)

public(R = Rational) # alias

@public
class RationalRange(tuple):
    """Closed range [start, end] of rational numbers."""

    __slots__ = ()

    def __new__(cls, start, end):
        return tuple.__new__(cls, (Rational(start), Rational(end)))

    def __getnewargs__(self):
        return self.start, self.end

    @property
    def start(self) -> Rational:
        return self[0]

    @property
    def end(self) -> Rational:
        """Inclusive upper bound."""
        return self[1]

    def is_empty(self) -> bool:
        return self.start > self.end

    def __contains__(self, value) -> bool:
        if not isinstance(value, Rational):
            raise TypeError("Left-hand side of 'in' supports only Rational.")
        return self.start <= value and value <= self.end

    def __repr__(self):
        return f"{type(self).__name__}({self.start!r}, {self.end!r})"

_integer_literal = re.compile(r'([+-]?)([0-9]+)')

def _parse_integer(part: str, text: str) -> int:
    m = _integer_literal.fullmatch(part)
    if not m:
        raise ParseError(f"Invalid integer literal {part!r} in {text!r}.")
    sign, digits = m.groups()
    n = digits_to_int(digits)
    return -n if sign == "-" else n

def _split_literal(text):
    if not isinstance(text, str):
        raise TypeError(f"Expected str, not {type(text).__name__}.")
    parts = text.split("/")
    if len(parts) == 2:
        num, den = parts
        return _parse_integer(num, text), _parse_integer(den, text)
    # Anything but exactly one separator is read as a plain integer,
    # so "1/2/3" fails here.
    return _parse_integer(text, text), 1

@public
def parse_rational(text: str) -> Rational:
    """
    Parses "n/d" or "n", where n and d are decimal integer literals with an
    optional sign, e.g. "117/1098", "-3/4", "+5". No whitespace is allowed.
    The result is normalized, i.e. str(parse_rational("117/1098")) == "13/122".

    Raises :class:`ParseError` for malformed text and :class:`DivisionByZero`
    for a zero denominator.
    """
    return Rational.parse(text)

@public
def div_by(numerator: int, denominator: int) -> Rational:
    """Returns numerator/denominator as normalized Rational."""
    return Rational(numerator, denominator)

@public
def add(a: Rational, b: Rational) -> Rational:
    return a + b

@public
def subtract(a: Rational, b: Rational) -> Rational:
    return a - b

@public
def multiply(a: Rational, b: Rational) -> Rational:
    return a * b

@public
def divide(a: Rational, b: Rational) -> Rational:
    """Raises :class:`DivisionByZero` if b is zero."""
    return a / b

@public
def negate(a: Rational) -> Rational:
    return -a

@public
def compare(a: Rational, b: Rational) -> Ordering:
    return a.compare(b)

@public
def in_range(value: Rational, lo: Rational, hi: Rational) -> bool:
    """Returns whether lo <= value <= hi."""
    return value in RationalRange(lo, hi)
