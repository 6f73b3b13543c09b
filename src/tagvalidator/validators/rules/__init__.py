"""Built-in validation rules."""

from typing import Dict

from ..base import BaseValidationRule
from .bound_rules import MaxRule, MinRule, parse_bound
from .format_rules import EmailRule, PasswordRule, UsernameRule
from .presence_rules import RequiredRule


def get_all_default_rules():
    """Instantiate all built-in rules, in dispatch-table order."""
    return [
        # Flags
        RequiredRule(),
        PasswordRule(),
        EmailRule(),
        UsernameRule(),
        # Parameterized
        MinRule(),
        MaxRule(),
    ]


_DEFAULT_RULES = get_all_default_rules()

FLAG_RULES: Dict[str, BaseValidationRule] = {
    r.name: r for r in _DEFAULT_RULES if not r.takes_argument
}
PARAMETERIZED_RULES: Dict[str, BaseValidationRule] = {
    r.name: r for r in _DEFAULT_RULES if r.takes_argument
}

__all__ = [
    "FLAG_RULES",
    "PARAMETERIZED_RULES",
    "EmailRule",
    "MaxRule",
    "MinRule",
    "PasswordRule",
    "RequiredRule",
    "UsernameRule",
    "get_all_default_rules",
    "parse_bound",
]
