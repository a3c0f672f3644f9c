"""Form Validator: combines a fixed set of field validators into one result.

Usage:
    form = FormValidator(name_field, email_field, zip_field)
    if not form.valid:
        show_error(form.error_message)
"""

from typing import Iterable

import structlog

from formvalidation.config import get_settings
from formvalidation.exceptions import RuleConfigurationError
from formvalidation.validators.field import FieldValidator
from formvalidation.validators.models import FormReport

logger = structlog.get_logger()


class FormValidator:
    """Read-only view over several fields.

    Holds references only; the host owns the fields and their widgets. The
    field set is fixed at construction. Reading ``valid`` or
    ``error_message`` never revalidates a field; call ``validate()`` for that.
    """

    def __init__(self, *fields: FieldValidator):
        for field in fields:
            if not isinstance(field, FieldValidator):
                raise RuleConfigurationError(
                    f"Expected a FieldValidator, got {type(field).__name__}", argument="fields"
                )
        self._fields = tuple(fields)

    @classmethod
    def with_fields(cls, fields: Iterable[FieldValidator]) -> "FormValidator":
        """Create a form validator from any iterable of fields."""
        return cls(*fields)

    @property
    def fields(self) -> tuple[FieldValidator, ...]:
        return self._fields

    @property
    def valid(self) -> bool:
        """True iff every field's last computed validity is True. Empty forms are valid."""
        return all(field.is_valid for field in self._fields)

    @property
    def error_message(self) -> str:
        """Non-empty field messages in field order, joined by ``FORM_ERROR_SEPARATOR``."""
        messages = [field.error_message for field in self._fields]
        return get_settings().FORM_ERROR_SEPARATOR.join(m for m in messages if m)

    def validate(self) -> bool:
        """Revalidate every field in order, then return the combined validity."""
        for field in self._fields:
            field.revalidate()

        valid = self.valid
        logger.info(
            "form_validated",
            valid=valid,
            fields=len(self._fields),
            invalid_fields=[f.name for f in self._fields if not f.is_valid],
        )
        return valid

    def report(self) -> FormReport:
        """Snapshot of the current state of every field. Does not revalidate."""
        return FormReport.build(
            [field.snapshot() for field in self._fields],
            separator=get_settings().FORM_ERROR_SEPARATOR,
        )

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self):
        return iter(self._fields)

    def __repr__(self) -> str:
        return f"<FormValidator fields={len(self._fields)}>"
