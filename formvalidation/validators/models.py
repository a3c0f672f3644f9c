"""Validation models: rule outcomes and field/form state snapshots."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from formvalidation.config import get_settings


class RuleOutcome(str, Enum):
    """How a single rule evaluation ended."""

    PASSED = "passed"
    FIELD_INVALID = "field_invalid"                  # The text broke the rule
    RULE_DEFINITION_ERROR = "rule_definition_error"  # Pattern did not compile
    RULE_EXCEPTION = "rule_exception"                # Predicate raised


class RuleResult(BaseModel):
    """Result of evaluating one rule against one text."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    kind: RuleOutcome = RuleOutcome.PASSED

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def passed(cls) -> "RuleResult":
        return cls(valid=True)

    @classmethod
    def failed(cls, errors: Optional[list[str]] = None, kind: RuleOutcome = RuleOutcome.FIELD_INVALID) -> "RuleResult":
        return cls(valid=False, errors=list(errors or []), kind=kind)


class FieldState(BaseModel):
    """Point-in-time copy of a field validator's state."""

    name: str
    text: str = ""
    valid: bool = True
    error_messages: list[str] = Field(default_factory=list)

    @property
    def error_message(self) -> str:
        return get_settings().FIELD_ERROR_SEPARATOR.join(self.error_messages)


class FormReport(BaseModel):
    """Combined state of every field in a form."""

    valid: bool = Field(description="True if every field is valid (vacuously true when empty)")
    error_message: str = Field(default="", description="Non-empty field messages in field order")
    fields: list[FieldState] = Field(default_factory=list)
    invalid_fields: list[str] = Field(default_factory=list)

    @classmethod
    def build(cls, fields: list[FieldState], separator: str) -> "FormReport":
        """Build a report from field snapshots, preserving field order."""
        messages = [f.error_message for f in fields if f.error_message]
        return cls(
            valid=all(f.valid for f in fields),
            error_message=separator.join(messages),
            fields=fields,
            invalid_fields=[f.name for f in fields if not f.valid],
        )
