"""Base rule: abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit. Field validators
evaluate any mix of rules through the same ``evaluate`` call.
"""

from abc import ABC, abstractmethod

import structlog

from formvalidation.config import Settings, get_settings
from formvalidation.validators.models import RuleResult

logger = structlog.get_logger()


class BaseRule(ABC):
    """Abstract base for all field rules.

    Contract:
        - evaluate() never mutates the text it is given
        - evaluate() never raises for bad input; it reports it in the result
        - evaluate() is deterministic for a deterministic rule
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging and synthetic messages."""
        ...

    @abstractmethod
    def evaluate(self, text: str) -> RuleResult:
        """Check the text against this rule.

        Args:
            text: Current content of the field

        Returns:
            RuleResult with validity and any error messages
        """
        ...

    # ── Helper Methods ──

    def _synthetic_message(self, template_setting: str, **values) -> str:
        """Format a configured message template, falling back to its default.

        A misconfigured template (unknown placeholder, stray brace) must not
        turn a reported rule failure into a crash.
        """
        template = getattr(get_settings(), template_setting)
        try:
            return template.format(**values)
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            logger.warning(
                "message_template_invalid",
                setting=template_setting,
                template=template,
                error=str(e),
            )
            return Settings.model_fields[template_setting].default.format(**values)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"
