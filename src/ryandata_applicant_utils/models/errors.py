"""Applicant-specific error classes.

These classes provide package-specific error handling for value object
construction and SSN validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from ryandata_applicant_utils.models.enums import ValidationOutcome

# Package identifier for error context
PACKAGE_NAME = "ryandata_applicant_utils"


class RyanDataApplicantError(PydanticCustomError):
    """Custom exception for ryandata_applicant_utils that wraps Pydantic errors.

    Inherits from PydanticCustomError so that raising it inside a model
    validator surfaces as a regular pydantic.ValidationError, while factories
    that validate up front can raise it directly.
    """

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> RyanDataApplicantError:
        """Wrap a PydanticCustomError as RyanDataApplicantError."""
        return cls(
            error.type,
            error.message_template,
            error.context,
        )

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataApplicantError:
        """Wrap a pydantic.ValidationError, keeping the first custom error found.

        Args:
            error: The ValidationError (or any exception) to wrap.
            context: Additional context to include in the error.

        Returns:
            RyanDataApplicantError with extracted or converted error details.
        """
        from pydantic import ValidationError

        ctx: dict[str, Any] = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(error, ValidationError):
            errors = error.errors()
            for err_dict in errors:
                if err_dict.get("ctx", {}).get("package") == PACKAGE_NAME:
                    return cls(
                        err_dict["type"],
                        err_dict.get("msg", str(error)),
                        {**ctx, **err_dict.get("ctx", {})},
                    )

            error_messages = "; ".join(e.get("msg", str(e)) for e in errors)
            return cls("validation_error", error_messages, ctx)

        return cls("validation_error", str(error), ctx)


class SsnValidationError(RyanDataApplicantError):
    """Raised when an SSN fails validation at an exception-preferring boundary.

    Carries the ValidationOutcome and the original, un-normalized input.
    """

    @classmethod
    def from_outcome(cls, outcome: ValidationOutcome, value: str | None) -> SsnValidationError:
        return cls(
            "ssn_validation",
            "SSN validation failed: {reason} (value: {value})",
            {
                "package": PACKAGE_NAME,
                "outcome": outcome.name,
                "legacy_code": outcome.legacy_code,
                "reason": outcome.message,
                "value": value,
            },
        )

    @property
    def outcome(self) -> ValidationOutcome:
        from ryandata_applicant_utils.models.enums import ValidationOutcome

        return ValidationOutcome[(self.context or {})["outcome"]]

    @property
    def invalid_value(self) -> str | None:
        return (self.context or {}).get("value")

    @property
    def legacy_error_code(self) -> int:
        return self.outcome.legacy_code


class UnwrappedFailureError(RuntimeError):
    """Raised when a value is extracted from a failed lookup result.

    This signals a programming error: callers that need safety should use
    ``get_value_or_default`` or match on the result variant.
    """
