"""REST error types."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from resterr.api.models import CauseDetail, RestErrDetail


def is_client_error_status(code: int) -> bool:
    """Check if a status code is in the 4xx range."""
    return 400 <= code < 500


def is_server_error_status(code: int) -> bool:
    """Check if a status code is in the 5xx range."""
    return 500 <= code < 600


@dataclass(frozen=True)
class Cause:
    """Field-level detail of a failed request, most often a validation error."""

    field: str  # Field or parameter that caused the error
    message: str  # Description of the cause

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


def normalize_causes(causes: Iterable[Cause | Mapping[str, Any]] | None) -> tuple[Cause, ...]:
    """Snapshot causes into a tuple of Cause.

    Args:
        causes: Cause instances or mappings with "field" and "message" keys

    Returns:
        Tuple of Cause (empty if causes is None)

    Raises:
        ValueError: If a mapping lacks "field" or "message"
    """
    if causes is None:
        return ()

    result: list[Cause] = []
    for cause in causes:
        if isinstance(cause, Cause):
            result.append(cause)
            continue
        try:
            result.append(Cause(field=str(cause["field"]), message=str(cause["message"])))
        except (KeyError, TypeError) as exc:
            msg = f"Invalid cause {cause!r}: expected 'field' and 'message'"
            raise ValueError(msg) from exc
    return tuple(result)


@dataclass(eq=False)
class RestErr(Exception):
    """Structured API error. Serializes to the response body of an HTTP error."""

    message: str  # Human-readable message
    error: str  # Short error class, e.g. "bad request"
    code: int  # HTTP status code
    causes: tuple[Cause, ...] = ()

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    # Underlying error, never serialized
    wrapped: BaseException | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Snapshot causes and set Exception args."""
        self.causes = normalize_causes(self.causes)
        super().__init__(self.message)
        if self.wrapped is not None:
            self.__cause__ = self.wrapped

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            self.__class__,
            (self.message, self.error, self.code, self.causes, self.timestamp, self.wrapped),
        )

    def __str__(self) -> str:
        if self.wrapped is not None:
            return f"{self.message}: {self.wrapped}"
        return self.message

    @property
    def error_class(self) -> str:
        return self.error

    @property
    def status_code(self) -> int:
        return self.code

    def with_cause(self, err: BaseException) -> "RestErr":
        """Attach the underlying error.

        The error is also set as ``__cause__`` so tracebacks show it the same
        way as ``raise ... from err``.

        Args:
            err: Underlying error

        Returns:
            This error, for chaining
        """
        self.wrapped = err
        self.__cause__ = err
        return self

    def unwrap(self) -> BaseException | None:
        """Return the attached underlying error, if any."""
        return self.wrapped

    def is_client_error(self) -> bool:
        return is_client_error_status(self.code)

    def is_server_error(self) -> bool:
        return is_server_error_status(self.code)

    def is_not_found(self) -> bool:
        return self.code == 404

    def is_unauthorized(self) -> bool:
        return self.code == 401

    def is_forbidden(self) -> bool:
        return self.code == 403

    def to_dict(self, omit_empty_causes: bool = True) -> dict[str, Any]:
        """Serialize for API responses.

        Args:
            omit_empty_causes: Leave out "causes" when there are none

        Returns:
            Dictionary representation of the error
        """
        data: dict[str, Any] = {
            "message": self.message,
            "error": self.error,
            "code": self.code,
        }
        if self.causes or not omit_empty_causes:
            data["causes"] = [cause.to_dict() for cause in self.causes]
        data["timestamp"] = self.timestamp.isoformat()
        return data

    def to_model(self, omit_empty_causes: bool = True) -> RestErrDetail:
        """Build the pydantic response model for this error.

        Args:
            omit_empty_causes: Set causes to None rather than [] when there are none
        """
        causes = [CauseDetail(field=c.field, message=c.message) for c in self.causes]
        return RestErrDetail(
            message=self.message,
            error=self.error,
            code=self.code,
            causes=causes if causes or not omit_empty_causes else None,
            timestamp=self.timestamp,
        )

    def to_json(self, omit_empty_causes: bool = True) -> str:
        """Serialize to a JSON response body.

        Args:
            omit_empty_causes: Leave out "causes" when there are none
        """
        return self.to_model(omit_empty_causes).model_dump_json(exclude_none=True)
