"""Chainable validation rules for raw text input."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

_SPACE = r"[ \t\n\v\f\r]*"
_INT_PREFIX = re.compile(_SPACE + r"([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    _SPACE
    + r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_FLOAT_MAX = 3.4028234663852886e38


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _is_float(text: str) -> bool:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return False
    value = float(match.group(1))
    return math.isnan(value) or "inf" in match.group(1).lower() or abs(value) <= _FLOAT_MAX


@dataclass
class ErrorBag:
    """Collects the messages of failed checks."""

    errors: list[str] = field(default_factory=list)

    def push(self, error: str) -> None:
        self.errors.append(error)

    def is_any(self) -> bool:
        return bool(self.errors)


class Constraint:
    """A rule that passes its input on to the next rule in the chain."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        self.next: Constraint | None = None

    def has_next(self) -> bool:
        return self.next is not None

    def set_next(self, next_constraint: Constraint) -> Constraint:
        self.next = next_constraint
        return self

    def check(self, target: str, error_bag: ErrorBag) -> bool:
        if self.next is None:
            return True
        return self.next.check(target, error_bag)

    def _fail(self, error_bag: ErrorBag) -> bool:
        error_bag.push(self.message)
        return False


class MustFixSizeConstraint(Constraint):
    """The input must have exactly the given length."""

    def __init__(self, fix_size: int) -> None:
        super().__init__(f"Input harus memiliki panjang {fix_size}")
        self.fix_size = fix_size

    def check(self, target: str, error_bag: ErrorBag) -> bool:
        if len(target) != self.fix_size:
            return self._fail(error_bag)
        return super().check(target, error_bag)


class MustInRangeConstraint(Constraint):
    """The input, read as an integer, must lie within [minimum, maximum].

    Input with no leading integer raises ValueError.
    """

    def __init__(self, minimum: int, maximum: int) -> None:
        super().__init__(f"Input harus berada di antara {minimum} dan {maximum}")
        self.minimum = minimum
        self.maximum = maximum

    def check(self, target: str, error_bag: ErrorBag) -> bool:
        if not self.minimum <= _to_int(target) <= self.maximum:
            return self._fail(error_bag)
        return super().check(target, error_bag)


class MustIntegerConstraint(Constraint):
    """Every character of the input must be an ASCII digit."""

    def __init__(self) -> None:
        super().__init__("Input harus integer")

    def check(self, target: str, error_bag: ErrorBag) -> bool:
        if any(not "0" <= char <= "9" for char in target):
            return self._fail(error_bag)
        return super().check(target, error_bag)


class MustNumericConstraint(Constraint):
    """The input must start with a number."""

    def __init__(self) -> None:
        super().__init__("Input harus bertipe numerik")

    def check(self, target: str, error_bag: ErrorBag) -> bool:
        if not _is_float(target):
            return self._fail(error_bag)
        return super().check(target, error_bag)