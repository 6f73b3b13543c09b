"""Result models returned by the validation engine."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import FieldValidationError


class ValidationResult(BaseModel):
    """Outcome of a single validation pass: success or the first failure."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="True when every rule passed")
    error: Optional[str] = Field(None, description="Message of the first failure")
    field_name: Optional[str] = Field(None, description="Field that failed")
    rule_name: Optional[str] = Field(None, description="Rule that failed")

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    def raise_for_error(self) -> None:
        """Raise FieldValidationError if this result is a failure."""
        if not self.is_valid:
            raise FieldValidationError(
                self.error or "",
                field_name=self.field_name,
                rule_name=self.rule_name,
            )

    def __bool__(self) -> bool:
        return self.is_valid
