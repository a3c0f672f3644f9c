"""Visual feedback: post-validation callbacks that drive a host widget's style.

Rendering belongs to the host toolkit. These helpers only decide which color
to hand over, so they work with any widget that can take one.
"""

from typing import Any, Callable, Optional

import structlog

from formvalidation.exceptions import RuleConfigurationError

logger = structlog.get_logger()

# Type alias for the host's "apply this color" function
ColorSetter = Callable[[Any], None]


class TextColorFeedback:
    """Swap a field's text color between a valid and an invalid color.

    Either color may be left unset, in which case that state leaves the
    widget untouched.

    Usage:
        field.post_validation_callback = TextColorFeedback(
            widget.set_text_color, valid_color="black", invalid_color="red",
        )
    """

    def __init__(
        self,
        apply: ColorSetter,
        valid_color: Optional[Any] = None,
        invalid_color: Optional[Any] = None,
    ):
        if not callable(apply):
            raise RuleConfigurationError(
                f"Color setter must be callable, got {type(apply).__name__}", argument="apply"
            )
        self.apply = apply
        self.valid_color = valid_color
        self.invalid_color = invalid_color

    def color_for(self, valid: bool) -> Optional[Any]:
        return self.valid_color if valid else self.invalid_color

    def __call__(self, valid: bool) -> None:
        color = self.color_for(valid)
        if color is None:
            return
        self.apply(color)


def chain_callbacks(*callbacks: Optional[Callable[[bool], None]]) -> Callable[[bool], None]:
    """Combine several post-validation callbacks into one.

    Callbacks run in order. ``None`` entries are skipped so optional hooks
    can be passed straight through. A failing callback is logged and the
    rest still run.
    """
    active = [cb for cb in callbacks if cb is not None]
    for cb in active:
        if not callable(cb):
            raise RuleConfigurationError(
                f"Callback must be callable, got {type(cb).__name__}", argument="callbacks"
            )

    def callback(valid: bool) -> None:
        for cb in active:
            try:
                cb(valid)
            except Exception as e:
                logger.warning("chained_callback_failed", callback=repr(cb), error=str(e))

    return callback
