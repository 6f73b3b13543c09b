"""
tagvalidator - declarative field validation

Attach rule annotations such as ``"required,min=3"`` to the fields of a
pydantic model or dataclass, then validate instances against them. The first
failing rule is reported.
"""

__version__ = "0.1.0"

import sys

if sys.version_info < (3, 10):
    raise RuntimeError("tagvalidator requires Python 3.10 or higher")

from .config import DEFAULT_TAG_KEY
from .exceptions import FieldValidationError, RuleDeclarationError, TagValidatorError
from .schemas.base import ValidationResult
from .validators import (
    FieldDeclaration,
    RuleTable,
    ValidationEngine,
    check,
    get_engine,
    validate,
)

__all__ = [
    "__version__",
    # Main API
    "validate",
    "check",
    "ValidationEngine",
    "get_engine",
    # Explicit declarations
    "FieldDeclaration",
    "RuleTable",
    # Result types
    "ValidationResult",
    # Errors
    "TagValidatorError",
    "RuleDeclarationError",
    "FieldValidationError",
    # Config
    "DEFAULT_TAG_KEY",
]
