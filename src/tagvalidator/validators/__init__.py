"""
Rule engine for field-level validation.

Fields declare their checks as a rule annotation such as
``"required,min=3"``; the engine walks the fields in order and reports the
first rule that fails.
"""

from functools import lru_cache
from typing import Any

from ..config import DEFAULT_TAG_KEY
from ..schemas.base import ValidationResult
from .base import BaseValidationRule, ParsedRule, RuleFinding
from .engine import ValidationEngine
from .parser import normalize, split_rules
from .table import FieldDeclaration, FieldRules, RuleTable, resolve_kind


@lru_cache(maxsize=None)
def _engine_for(tag_key: str) -> ValidationEngine:
    return ValidationEngine(tag_key=tag_key)


def get_engine(tag_key: str = DEFAULT_TAG_KEY) -> ValidationEngine:
    """Shared engine for a tag key, so rule tables are compiled once."""
    return _engine_for(tag_key)


def validate(record: Any, tag_key: str = DEFAULT_TAG_KEY) -> ValidationResult:
    """
    One-liner validation function.

    Args:
        record: A pydantic model or dataclass instance
        tag_key: Metadata key holding the rule annotation

    Returns:
        ValidationResult
    """
    return get_engine(tag_key).validate(record)


def check(record: Any, tag_key: str = DEFAULT_TAG_KEY) -> None:
    """Validate ``record`` and raise FieldValidationError on the first failure."""
    get_engine(tag_key).check(record)


__all__ = [
    "BaseValidationRule",
    "FieldDeclaration",
    "FieldRules",
    "ParsedRule",
    "RuleFinding",
    "RuleTable",
    "ValidationEngine",
    "check",
    "get_engine",
    "normalize",
    "resolve_kind",
    "split_rules",
    "validate",
]
