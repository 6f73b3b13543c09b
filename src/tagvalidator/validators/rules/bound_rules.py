"""Lower and upper bound rules for integers and string lengths."""

import re
from typing import Any, Optional, Union

from ..base import BaseValidationRule

_INTEGER_REGEX = re.compile(r"[+-]?[0-9]+")

# Bounds are 64-bit signed integers
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_bound(argument: Optional[str]) -> Union[int, str]:
    """
    Parse a rule argument as a base-10 integer.

    Returns:
        The bound, or a failure reason when the argument is not an integer
    """
    if argument is None or not _INTEGER_REGEX.fullmatch(argument):
        return f"{argument} is not integer"
    bound = int(argument)
    if not _INT64_MIN <= bound <= _INT64_MAX:
        return f"{argument} is not integer"
    return bound


class _BoundRule(BaseValidationRule):
    @property
    def takes_argument(self) -> bool:
        return True

    def check(self, value: Any, argument: Optional[str] = None) -> Optional[str]:
        bound = parse_bound(argument)
        if isinstance(bound, str):
            return bound
        if value is None:
            return None
        if isinstance(value, str):
            return self._check_length(len(value), bound)
        return self._check_value(value, bound)

    def _check_length(self, length: int, bound: int) -> Optional[str]:
        raise NotImplementedError

    def _check_value(self, value: int, bound: int) -> Optional[str]:
        raise NotImplementedError


class MinRule(_BoundRule):
    """Lower bound on an integer value or a string length."""

    @property
    def name(self) -> str:
        return "min"

    @property
    def description(self) -> str:
        return "Fails when an integer or a string length is below the bound"

    def _check_value(self, value: int, bound: int) -> Optional[str]:
        if value < bound:
            return f"value ({value}) is lower than minimum value ({bound})"
        return None

    def _check_length(self, length: int, bound: int) -> Optional[str]:
        if length < bound:
            return f"length ({length}) is lower than minimum length ({bound})"
        return None


class MaxRule(_BoundRule):
    """Upper bound on an integer value or a string length."""

    @property
    def name(self) -> str:
        return "max"

    @property
    def description(self) -> str:
        return "Fails when an integer or a string length is above the bound"

    def _check_value(self, value: int, bound: int) -> Optional[str]:
        if value > bound:
            return f"value ({value}) is higher than maximum value ({bound})"
        return None

    def _check_length(self, length: int, bound: int) -> Optional[str]:
        # Message text is matched verbatim by existing consumers
        if length > bound:
            return f"length ({length}) length is higher than maximim length ({bound})"
        return None
