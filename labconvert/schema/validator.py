from typing import Any

from pydantic import ValidationError

from labconvert.converter.exceptions import SchemaValidationError, ValidationIssue
from labconvert.schema.models import StructuredReportSchema


def assert_structured_report(candidate: Any) -> None:
    """Check a candidate against the structured report schema.

    Raises:
        SchemaValidationError: listing every violated path and its message.
    """
    try:
        StructuredReportSchema.model_validate(candidate)
    except ValidationError as exc:
        raise SchemaValidationError(
            items=[_to_issue(error) for error in exc.errors()],
            input=candidate,
        ) from exc


def _to_issue(error: Any) -> ValidationIssue:
    path = "".join(f"/{part}" for part in error.get("loc", ()))
    return ValidationIssue(path=path, message=str(error.get("msg", "")))
