"""Password, e-mail and username format rules."""

import re
from typing import Any, Optional, Tuple

from ...config import PASSWORD_SYMBOLS
from ..base import BaseValidationRule

# Checked in order; the first missing category is reported
_PASSWORD_REQUIREMENTS = (
    (re.compile(r"[0-9]"), "must contain at least one number"),
    (re.compile(r"[a-z]"), "must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "must contain at least one uppercase letter"),
    (
        re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]"),
        "must contain at least one symbol\n(!, @, #, ~, $, %, ^, &, *, (, ), +, |, _, )",
    ),
)

# \w is ASCII-only here: letters, digits and underscore
_EMAIL_REGEX = re.compile(r"[\w.-]+@(?:[\w-]+\.)+[\w-]{2,24}", re.ASCII)

_USERNAME_REGEX = re.compile(r"[A-Za-z0-9._-]+")


class _StringRule(BaseValidationRule):
    @property
    def supported_types(self) -> Tuple[type, ...]:
        return (str,)

    def check(self, value: Any, argument: Optional[str] = None) -> Optional[str]:
        if value is None:
            return None
        return self._check_string(value)

    def _check_string(self, value: str) -> Optional[str]:
        raise NotImplementedError


class PasswordRule(_StringRule):
    """Require a digit, a lowercase letter, an uppercase letter and a symbol."""

    @property
    def name(self) -> str:
        return "password"

    @property
    def description(self) -> str:
        return "Verifies that a password mixes digits, letter cases and symbols"

    def _check_string(self, value: str) -> Optional[str]:
        for pattern, message in _PASSWORD_REQUIREMENTS:
            if not pattern.search(value):
                return message
        return None


class EmailRule(_StringRule):
    """Check the shape of an e-mail address."""

    @property
    def name(self) -> str:
        return "email"

    @property
    def description(self) -> str:
        return "Verifies that a string looks like an e-mail address"

    @property
    def prefix_field_name(self) -> bool:
        return False

    def _check_string(self, value: str) -> Optional[str]:
        if not _EMAIL_REGEX.fullmatch(value):
            return "e-mail is invalid"
        return None


class UsernameRule(_StringRule):
    """Allow only letters, digits, dots, underscores and hyphens."""

    @property
    def name(self) -> str:
        return "username"

    @property
    def description(self) -> str:
        return "Verifies that a username uses only [A-Za-z0-9._-]"

    @property
    def prefix_field_name(self) -> bool:
        return False

    def _check_string(self, value: str) -> Optional[str]:
        if not _USERNAME_REGEX.fullmatch(value):
            return "username is invalid"
        return None
