"""Validation engine that resolves rule tables and runs them."""

import logging
import threading
from typing import Any, Dict, Iterable

from ..config import DEFAULT_TAG_KEY
from ..schemas.base import ValidationResult
from .table import FieldDeclaration, RuleTable

logger = logging.getLogger(__name__)


class ValidationEngine:
    """
    Validates records against the rule annotations declared on their fields.

    Rule tables are compiled on first use of a record type and reused after
    that, so declaration errors surface once per type.

    Usage:
        engine = ValidationEngine()
        result = engine.validate(SignupForm(email="a@b.io", ...))
        if not result:
            print(result.error)

        # Types that are neither pydantic models nor dataclasses:
        engine.register(Row, [FieldDeclaration("age", int, "required,min=18")])
    """

    def __init__(self, tag_key: str = DEFAULT_TAG_KEY):
        self.tag_key = tag_key
        self._tables: Dict[type, RuleTable] = {}
        self._lock = threading.Lock()

    def register(
        self, record_type: type, declarations: Iterable[FieldDeclaration]
    ) -> RuleTable:
        """Build the rule table for ``record_type`` from explicit declarations."""
        owner = getattr(record_type, "__name__", repr(record_type))
        table = RuleTable.from_declarations(owner, declarations)
        with self._lock:
            self._tables[record_type] = table
        logger.debug("Registered explicit declarations for %s", owner)
        return table

    def compile(self, record_type: type) -> RuleTable:
        """
        Return the rule table for ``record_type``, building it if needed.

        Raises:
            RuleDeclarationError: the type's annotations are invalid
        """
        table = self._tables.get(record_type)
        if table is not None:
            return table

        table = RuleTable.from_type(record_type, self.tag_key)
        with self._lock:
            table = self._tables.setdefault(record_type, table)
        return table

    def is_registered(self, record_type: type) -> bool:
        return record_type in self._tables

    def validate(self, record: Any) -> ValidationResult:
        """
        Check ``record`` and return the first failure, if any.

        Raises:
            RuleDeclarationError: the record type's annotations are invalid
        """
        return self.compile(type(record)).validate(record)

    def check(self, record: Any) -> None:
        """Like validate(), but raise FieldValidationError on failure."""
        self.validate(record).raise_for_error()
