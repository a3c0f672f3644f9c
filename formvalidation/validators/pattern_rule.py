"""Pattern Rule: the field text must fully match a regular expression."""

import re
from typing import Optional

import structlog

from formvalidation.exceptions import RuleConfigurationError
from formvalidation.validators.base import BaseRule
from formvalidation.validators.models import RuleResult, RuleOutcome

logger = structlog.get_logger()


class PatternRule(BaseRule):
    """Valid iff the whole text matches ``pattern``.

    The pattern is compiled on first use, not at construction, so a malformed
    pattern shows up as an invalid field with a synthetic message instead of
    breaking form setup.
    """

    def __init__(self, pattern: str, error_message: str):
        if not isinstance(pattern, str):
            raise RuleConfigurationError(
                f"Pattern must be a string, got {type(pattern).__name__}", argument="pattern"
            )
        if not isinstance(error_message, str):
            raise RuleConfigurationError(
                f"Error message must be a string, got {type(error_message).__name__}", argument="error_message"
            )
        self.pattern = pattern
        self.error_message = error_message
        self._compiled: Optional[re.Pattern] = None

    @property
    def name(self) -> str:
        return self.pattern

    def evaluate(self, text: str) -> RuleResult:
        try:
            compiled = self._compile()
        except (re.error, OverflowError, RecursionError) as e:
            logger.warning("pattern_rule_invalid", pattern=self.pattern, error=str(e))
            message = self._synthetic_message("PATTERN_ERROR_TEMPLATE", pattern=self.pattern, error=e)
            return RuleResult.failed([message], kind=RuleOutcome.RULE_DEFINITION_ERROR)

        if compiled.fullmatch(text) is None:
            return RuleResult.failed([self.error_message])
        return RuleResult.passed()

    def _compile(self) -> re.Pattern:
        if self._compiled is None:
            self._compiled = re.compile(self.pattern)
        return self._compiled
