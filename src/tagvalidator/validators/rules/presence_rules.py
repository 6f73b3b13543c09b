"""Presence rules."""

from typing import Any, Optional

from ..base import BaseValidationRule

# Unicode White_Space characters. str.strip() with no argument would also
# remove the U+001C..U+001F separators, which count as content here.
_SPACE_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class RequiredRule(BaseValidationRule):
    """Reject the zero value: integer 0 or a blank string."""

    @property
    def name(self) -> str:
        return "required"

    @property
    def description(self) -> str:
        return "Fails on 0, on strings that are empty after trimming, and on None"

    def check(self, value: Any, argument: Optional[str] = None) -> Optional[str]:
        if value is None:
            return "is required"
        if isinstance(value, str):
            if len(value.strip(_SPACE_CHARS)) == 0:
                return "is required"
        elif value == 0:
            return "is required"
        return None
