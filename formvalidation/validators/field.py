"""Field Validator: rules, validity and error state for one input field.

Usage:
    zip_code = FieldValidator(name="zip")
    zip_code.add_pattern_rule(r"\\d{5}", "Must be 5 digits")
    zip_code.post_validation_callback = lambda valid: widget.set_style(valid)

    # From the host's text-change handler:
    zip_code.text_changed(widget.text())
"""

import itertools
from typing import Callable, Iterable, Optional

import structlog

from formvalidation.config import get_settings
from formvalidation.exceptions import RuleConfigurationError
from formvalidation.validators.base import BaseRule
from formvalidation.validators.models import FieldState
from formvalidation.validators.pattern_rule import PatternRule
from formvalidation.validators.predicate_rule import Predicate, PredicateRule

logger = structlog.get_logger()

# Type alias for post-validation callbacks
PostValidationCallback = Callable[[bool], None]

_field_ids = itertools.count(1)


class FieldValidator:
    """Owns one field's rules and the result of the last evaluation.

    The host widget feeds text in and decides when to revalidate (see
    ``text_changed`` / ``editing_finished``); this class never listens to UI
    events itself. Every validity update, computed or assigned, goes through
    ``_set_valid`` and therefore fires ``post_validation_callback``.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: Optional[str] = None,
        validate_on_every_change: bool = True,
        post_validation_callback: Optional[PostValidationCallback] = None,
        rules: Optional[Iterable[BaseRule]] = None,
    ):
        self.name = name or f"field-{next(_field_ids)}"
        self.text = text
        self.validate_on_every_change = validate_on_every_change
        self.post_validation_callback = post_validation_callback
        self._rules: list[BaseRule] = []
        self._valid = True
        self._error_messages: list[str] = []

        for rule in rules or []:
            self.add_rule(rule)

    # ── State ──

    @property
    def rules(self) -> tuple[BaseRule, ...]:
        return tuple(self._rules)

    @property
    def is_valid(self) -> bool:
        return self._valid

    @is_valid.setter
    def is_valid(self, value: bool) -> None:
        """Force validity without running rules. Error messages are left as they are."""
        logger.debug("field_validity_overridden", field=self.name, valid=bool(value))
        self._set_valid(bool(value))

    @property
    def error_messages(self) -> list[str]:
        return list(self._error_messages)

    @property
    def error_message(self) -> str:
        """All error messages joined by ``FIELD_ERROR_SEPARATOR``, or "" if none."""
        return get_settings().FIELD_ERROR_SEPARATOR.join(self._error_messages)

    @property
    def post_validation_callback(self) -> Optional[PostValidationCallback]:
        return self._post_validation_callback

    @post_validation_callback.setter
    def post_validation_callback(self, callback: Optional[PostValidationCallback]) -> None:
        if callback is not None and not callable(callback):
            raise RuleConfigurationError(
                f"Post-validation callback must be callable, got {type(callback).__name__}",
                argument="post_validation_callback",
            )
        self._post_validation_callback = callback

    # ── Rule Configuration ──

    def add_rule(self, rule: BaseRule) -> None:
        """Append a rule; rules are evaluated in the order they were added."""
        if not isinstance(rule, BaseRule):
            raise RuleConfigurationError(
                f"Expected a BaseRule, got {type(rule).__name__}", argument="rule"
            )
        self._rules.append(rule)

    def add_pattern_rule(self, pattern: str, error_message: str) -> None:
        """Require the whole text to match ``pattern``; report ``error_message`` otherwise."""
        self.add_rule(PatternRule(pattern, error_message))

    def add_predicate_rule(self, fn: Predicate, name: Optional[str] = None) -> None:
        """Add ``fn(text, errors) -> bool``; it appends its own messages on failure."""
        self.add_rule(PredicateRule(fn, name=name))

    def set_pattern_rules(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Replace every rule with pattern rules built from (pattern, message) pairs."""
        self._rules = [PatternRule(pattern, message) for pattern, message in pairs]

    def clear_rules(self) -> None:
        self._rules = []

    # ── Evaluation ──

    def revalidate(self) -> bool:
        """Run every rule against the current text and publish the result.

        No short-circuit: all rules run so every problem is reported at once.
        The callback fires after state is fully updated, even if validity
        did not change.

        Returns:
            The new validity
        """
        errors: list[str] = []
        valid = True

        for rule in self._rules:
            result = rule.evaluate(self.text)
            if not result.valid:
                valid = False
                errors.extend(result.errors)

        self._error_messages = errors
        logger.debug(
            "field_revalidated",
            field=self.name,
            valid=valid,
            rules=len(self._rules),
            errors=len(errors),
        )
        self._set_valid(valid)
        return valid

    def text_changed(self, text: str) -> None:
        """Host hook for every edit. Revalidates only with ``validate_on_every_change``."""
        self.text = text
        if self.validate_on_every_change:
            self.revalidate()

    def editing_finished(self, text: Optional[str] = None) -> None:
        """Host hook for the end of an editing session.

        Revalidates when validation is deferred to this point, or when the
        host passes text that differs from the last text seen. Otherwise
        every-change validation has already made the state current.
        """
        changed = text is not None and text != self.text
        if text is not None:
            self.text = text
        if changed or not self.validate_on_every_change:
            self.revalidate()

    def snapshot(self) -> FieldState:
        return FieldState(
            name=self.name,
            text=self.text,
            valid=self._valid,
            error_messages=list(self._error_messages),
        )

    def _set_valid(self, valid: bool) -> None:
        self._valid = valid
        callback = self._post_validation_callback
        if callback is None:
            return
        try:
            callback(valid)
        except Exception as e:
            # A broken style hook must not abort the interaction
            logger.error(
                "post_validation_callback_failed",
                field=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )

    def __repr__(self) -> str:
        return f"<FieldValidator {self.name!r} valid={self._valid} rules={len(self._rules)}>"
