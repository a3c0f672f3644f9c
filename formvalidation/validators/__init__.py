"""Field and form validators.

Usage:
    from formvalidation.validators import FieldValidator, FormValidator

    zip_code = FieldValidator(name="zip")
    zip_code.add_pattern_rule(r"\\d{5}", "Must be 5 digits")
    form = FormValidator(zip_code)
"""

from formvalidation.validators.base import BaseRule
from formvalidation.validators.field import FieldValidator, PostValidationCallback
from formvalidation.validators.form import FormValidator
from formvalidation.validators.models import FieldState, FormReport, RuleOutcome, RuleResult
from formvalidation.validators.pattern_rule import PatternRule
from formvalidation.validators.predicate_rule import Predicate, PredicateRule

__all__ = [
    "BaseRule",
    "FieldValidator",
    "FormValidator",
    "PatternRule",
    "PredicateRule",
    "Predicate",
    "PostValidationCallback",
    "RuleResult",
    "RuleOutcome",
    "FieldState",
    "FormReport",
]
