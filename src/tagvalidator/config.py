"""
Configuration for tagvalidator.

Defaults shared by the tag parser and the built-in rules.
"""

# Metadata key holding the rule annotation on a field
DEFAULT_TAG_KEY = "validator"

# Stripped from the whole annotation before it is split
WHITESPACE_CHARS = (" ", "\t", "\v", "\n")

# Symbols accepted by the password rule
PASSWORD_SYMBOLS = "!@#~$%^&*()+|_"

__all__ = [
    "DEFAULT_TAG_KEY",
    "WHITESPACE_CHARS",
    "PASSWORD_SYMBOLS",
]
