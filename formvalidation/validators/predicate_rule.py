"""Predicate Rule: an arbitrary function decides validity and writes its own errors."""

from typing import Callable, Optional

import structlog

from formvalidation.exceptions import RuleConfigurationError
from formvalidation.validators.base import BaseRule
from formvalidation.validators.models import RuleResult, RuleOutcome

logger = structlog.get_logger()

# fn(text, errors) -> valid; may append any number of messages to errors
Predicate = Callable[[str, list], bool]


class PredicateRule(BaseRule):
    """Wraps a predicate function.

    Each evaluation hands the predicate a fresh error list. Messages it
    appends are reported only when it returns a falsy value; returning False
    without appending anything is a deliberate "invalid, no message" state.
    """

    def __init__(self, fn: Predicate, name: Optional[str] = None):
        if not callable(fn):
            raise RuleConfigurationError(
                f"Predicate must be callable, got {type(fn).__name__}", argument="fn"
            )
        self.fn = fn
        self._name = name or getattr(fn, "__name__", None) or repr(fn)

    @property
    def name(self) -> str:
        return self._name

    def evaluate(self, text: str) -> RuleResult:
        errors: list[str] = []
        try:
            valid = bool(self.fn(text, errors))
        except Exception as e:
            logger.error("predicate_rule_failed", rule=self.name, error=str(e), error_type=type(e).__name__)
            message = self._synthetic_message("PREDICATE_ERROR_TEMPLATE", rule=self.name, error=e)
            return RuleResult.failed([message], kind=RuleOutcome.RULE_EXCEPTION)

        if valid:
            return RuleResult.passed()
        return RuleResult.failed([str(err) for err in errors])
