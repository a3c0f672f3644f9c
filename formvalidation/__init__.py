"""formvalidation: declarative validation for interactive input fields."""

from formvalidation.config import Settings, get_settings
from formvalidation.exceptions import FormValidationError, RuleConfigurationError
from formvalidation.logging_config import configure_logging
from formvalidation.services import TextColorFeedback, chain_callbacks
from formvalidation.validators import (
    BaseRule,
    FieldState,
    FieldValidator,
    FormReport,
    FormValidator,
    PatternRule,
    PredicateRule,
    RuleOutcome,
    RuleResult,
)

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "FormValidationError",
    "RuleConfigurationError",
    "BaseRule",
    "PatternRule",
    "PredicateRule",
    "RuleResult",
    "RuleOutcome",
    "FieldValidator",
    "FieldState",
    "FormValidator",
    "FormReport",
    "TextColorFeedback",
    "chain_callbacks",
]
