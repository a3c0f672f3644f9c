"""Host-side helpers for wiring validators to widgets."""

from formvalidation.services.feedback import TextColorFeedback, chain_callbacks

__all__ = ["TextColorFeedback", "chain_callbacks"]
