"""Exceptions for misconfigured validators.

A field failing its rules is never an exception: it is reported through
``is_valid`` and ``error_messages``. These are raised only when application
code wires validators up with the wrong kind of object.
"""

from typing import Any, Optional


class FormValidationError(Exception):
    """Base exception for all validator configuration errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class RuleConfigurationError(FormValidationError, TypeError):
    """A rule, field or callback was given an unusable value."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_CONFIGURATION_ERROR",
            "message": self.message,
            "argument": self.argument,
        }
