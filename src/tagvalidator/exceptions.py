"""Exceptions raised by tagvalidator."""

from typing import Optional


class TagValidatorError(Exception):
    """Base class for all tagvalidator errors."""


class RuleDeclarationError(TagValidatorError):
    """
    A rule annotation is malformed or cannot apply to its field.

    Raised while building a rule table, never while checking values.
    """


class FieldValidationError(TagValidatorError):
    """A field value violated one of its rules."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        rule_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field_name = field_name
        self.rule_name = rule_name
