"""Base abstractions for validation rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class RuleFinding:
    """The failure reported by a rule for one field."""

    rule_name: str
    field_name: str
    message: str


class BaseValidationRule(ABC):
    """Abstract base class for the built-in rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used for this rule in annotations."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this rule checks."""
        ...

    @property
    def takes_argument(self) -> bool:
        """True for parameterized rules (``name=value``), False for flags."""
        return False

    @property
    def supported_types(self) -> Tuple[type, ...]:
        """Field types this rule may be declared on."""
        return (int, str)

    @property
    def prefix_field_name(self) -> bool:
        """Whether failure messages start with the field name."""
        return True

    def applies_to(self, kind: type) -> bool:
        return kind in self.supported_types

    @abstractmethod
    def check(self, value: Any, argument: Optional[str] = None) -> Optional[str]:
        """
        Run this rule against a single value.

        Args:
            value: Field value, already known to match a supported type
            argument: Raw argument for parameterized rules

        Returns:
            Failure reason, or None when the value passes
        """
        ...

    def finding(self, field_name: str, reason: str) -> RuleFinding:
        message = f"{field_name} {reason}" if self.prefix_field_name else reason
        return RuleFinding(rule_name=self.name, field_name=field_name, message=message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


@dataclass(frozen=True)
class ParsedRule:
    """A rule bound to the argument it was declared with."""

    rule: BaseValidationRule
    argument: Optional[str] = None

    def evaluate(self, field_name: str, value: Any) -> Optional[RuleFinding]:
        reason = self.rule.check(value, self.argument)
        if reason is None:
            return None
        return self.rule.finding(field_name, reason)
