"""
Per-type rule tables.

A rule table maps each annotated field of a record type, in declaration
order, to its parsed rules. Tables are built once per type; building one is
where every declaration error surfaces.
"""

import dataclasses
import logging
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel

from ..config import DEFAULT_TAG_KEY
from ..exceptions import RuleDeclarationError
from ..schemas.base import ValidationResult
from .base import ParsedRule, RuleFinding
from .parser import split_rules
from .rules import FLAG_RULES, PARAMETERIZED_RULES

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)


@dataclass(frozen=True)
class FieldDeclaration:
    """A field name, its declared type and its raw rule annotation."""

    name: str
    type: Any
    annotation: Optional[str] = None


def resolve_kind(annotation: Any) -> Tuple[Any, bool]:
    """
    Reduce a type annotation to the kind the rules dispatch on.

    ``Annotated[X, ...]`` and ``Optional[X]`` unwrap to ``X``; subclasses of
    ``str`` and ``int`` collapse to ``str`` and ``int``. ``bool`` stays
    ``bool`` so that integer rules do not apply to it.

    Returns:
        (kind, optional)
    """
    optional = False
    while True:
        origin = typing.get_origin(annotation)
        if origin is Annotated:
            annotation = typing.get_args(annotation)[0]
            continue
        if origin is Union or origin is types.UnionType:
            args = typing.get_args(annotation)
            non_none = [a for a in args if a is not _NONE_TYPE]
            if len(non_none) == 1 and len(args) == 2:
                optional = True
                annotation = non_none[0]
                continue
        break

    if isinstance(annotation, type) and not issubclass(annotation, bool):
        if issubclass(annotation, str):
            return str, optional
        if issubclass(annotation, int):
            return int, optional
    return annotation, optional


def _type_name(kind: Any) -> str:
    return getattr(kind, "__name__", repr(kind))


def _matches_kind(value: Any, kind: Any) -> bool:
    if kind is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, kind)


@dataclass(frozen=True)
class FieldRules:
    """The ordered rules of one field."""

    name: str
    kind: Any
    optional: bool
    rules: Tuple[ParsedRule, ...]

    def evaluate(self, value: Any) -> Optional[RuleFinding]:
        """Return the first failing rule for ``value``, or None."""
        if value is None:
            if not self.optional:
                return self._type_mismatch()
        elif not _matches_kind(value, self.kind):
            return self._type_mismatch()

        for parsed in self.rules:
            finding = parsed.evaluate(self.name, value)
            if finding is not None:
                return finding
        return None

    def _type_mismatch(self) -> RuleFinding:
        return RuleFinding(
            rule_name="type",
            field_name=self.name,
            message=f"{self.name} must be of type {_type_name(self.kind)}",
        )


def compile_field(owner: str, declaration: FieldDeclaration) -> FieldRules:
    """
    Parse and check the annotation of a single field.

    Raises:
        RuleDeclarationError: malformed token, unknown rule name, or a rule
            that cannot apply to the field's type
    """
    kind, optional = resolve_kind(declaration.type)
    parsed = []
    for name, argument in split_rules(declaration.annotation, owner):
        registry = FLAG_RULES if argument is None else PARAMETERIZED_RULES
        rule = registry.get(name)
        if rule is None:
            raise RuleDeclarationError(f"'{name}' invalid key at {owner}")
        if not rule.applies_to(kind):
            raise RuleDeclarationError(
                f"rule '{name}' is not applicable to type '{_type_name(kind)}' "
                f"at {owner}.{declaration.name}"
            )
        parsed.append(ParsedRule(rule=rule, argument=argument))

    return FieldRules(
        name=declaration.name, kind=kind, optional=optional, rules=tuple(parsed)
    )


def _field_type(record_type: type, f: dataclasses.Field) -> Any:
    """
    Resolve the annotation of one dataclass field.

    Only this field is evaluated, so forward references on other fields
    never need to resolve.
    """
    if not isinstance(f.type, str):
        return f.type

    holder = type(
        record_type.__name__,
        (),
        {"__module__": record_type.__module__, "__annotations__": {f.name: f.type}},
    )
    try:
        return typing.get_type_hints(holder, include_extras=True)[f.name]
    except NameError as exc:
        raise RuleDeclarationError(
            f"cannot resolve type of {_type_name(record_type)}.{f.name}: {exc}"
        ) from exc


def declarations_for(
    record_type: type, tag_key: str = DEFAULT_TAG_KEY
) -> List[FieldDeclaration]:
    """
    Read field declarations from a pydantic model or a dataclass.

    The annotation is looked up under ``tag_key`` in the field's
    ``json_schema_extra`` (pydantic) or ``metadata`` (dataclass).
    """
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        declarations = []
        for name, info in record_type.model_fields.items():
            extra = info.json_schema_extra
            annotation = extra.get(tag_key) if isinstance(extra, dict) else None
            declarations.append(FieldDeclaration(name, info.annotation, annotation))
        return declarations

    if isinstance(record_type, type) and dataclasses.is_dataclass(record_type):
        return [
            FieldDeclaration(f.name, _field_type(record_type, f), f.metadata[tag_key])
            for f in dataclasses.fields(record_type)
            if f.metadata.get(tag_key) is not None
        ]

    raise RuleDeclarationError(
        f"{_type_name(record_type)} is neither a pydantic model nor a dataclass; "
        "register its field declarations explicitly"
    )


@dataclass(frozen=True)
class RuleTable:
    """Ordered field rules for one record type."""

    owner: str
    fields: Tuple[FieldRules, ...]

    @classmethod
    def from_declarations(
        cls, owner: str, declarations: Iterable[FieldDeclaration]
    ) -> "RuleTable":
        """Build a table, skipping fields that carry no annotation."""
        fields = tuple(
            compile_field(owner, d) for d in declarations if d.annotation is not None
        )
        logger.debug("Compiled rule table for %s with %d fields", owner, len(fields))
        return cls(owner=owner, fields=fields)

    @classmethod
    def from_type(cls, record_type: type, tag_key: str = DEFAULT_TAG_KEY) -> "RuleTable":
        return cls.from_declarations(
            _type_name(record_type), declarations_for(record_type, tag_key)
        )

    def first_failure(self, record: Any) -> Optional[RuleFinding]:
        """Walk fields in order and return the first failing rule, or None."""
        is_mapping = isinstance(record, Mapping)
        for field_rules in self.fields:
            if is_mapping:
                value = record.get(field_rules.name)
            else:
                value = getattr(record, field_rules.name)
            finding = field_rules.evaluate(value)
            if finding is not None:
                logger.debug(
                    "%s failed rule %r on field %s",
                    self.owner,
                    finding.rule_name,
                    finding.field_name,
                )
                return finding
        return None

    def validate(self, record: Any) -> ValidationResult:
        finding = self.first_failure(record)
        if finding is None:
            return ValidationResult.ok()
        return ValidationResult(
            is_valid=False,
            error=finding.message,
            field_name=finding.field_name,
            rule_name=finding.rule_name,
        )

    def __len__(self) -> int:
        return len(self.fields)
