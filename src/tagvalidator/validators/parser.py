"""Parsing of rule annotations such as ``"required,min=3"``."""

from typing import List, Optional, Tuple

from ..config import WHITESPACE_CHARS
from ..exceptions import RuleDeclarationError


def normalize(annotation: str) -> str:
    """Strip every space, tab, vertical tab and newline from an annotation."""
    for w in WHITESPACE_CHARS:
        annotation = annotation.replace(w, "")
    return annotation


def split_rules(annotation: str, owner: str = "") -> List[Tuple[str, Optional[str]]]:
    """
    Split an annotation into ``(name, argument)`` tokens.

    Flag rules have ``argument=None``. Tokens are returned in declaration
    order.

    Args:
        annotation: Raw annotation string
        owner: Name of the declaring type, used in error messages

    Raises:
        RuleDeclarationError: a token contains more than one ``=``
    """
    tokens = []
    for token in normalize(annotation).split(","):
        parts = token.split("=")
        if len(parts) == 1:
            tokens.append((parts[0], None))
        elif len(parts) == 2:
            tokens.append((parts[0], parts[1]))
        else:
            raise RuleDeclarationError(f"'{token}' invalid format at {owner}")
    return tokens
