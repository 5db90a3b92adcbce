"""Error registry mapping HTTP status codes to error classes."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import Cause, RestErr, normalize_causes


@dataclass(frozen=True)
class ErrorTemplate:
    """Template for creating errors of one status."""

    code: int
    error: str  # Short error class, paired 1:1 with code
    description: str


class ErrorRegistry:
    """Registry of supported statuses. Creates errors from templates."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[int, ErrorTemplate] = {}
        self._load_builtin_templates()

    def get_template(self, code: int) -> ErrorTemplate | None:
        """Get template by status code.

        Args:
            code: HTTP status code to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(code)

    def list_codes(self) -> list[int]:
        """List all registered status codes, ascending."""
        return sorted(self._templates)

    def error_for(self, code: int) -> str:
        """Return the error class registered for a status code.

        Raises:
            ValueError: If status code not registered
        """
        template = self.get_template(code)
        if template is None:
            msg = f"Unknown status code: {code}"
            raise ValueError(msg)
        return template.error

    def create(
        self,
        code: int,
        message: str,
        causes: Iterable[Cause | Mapping[str, Any]] | None = None,
    ) -> RestErr:
        """Create error instance from template.

        Args:
            code: HTTP status code
            message: Already formatted message
            causes: Optional field-level causes

        Returns:
            RestErr instance

        Raises:
            ValueError: If status code not registered
        """
        return RestErr(
            message=message,
            error=self.error_for(code),
            code=code,
            causes=normalize_causes(causes),
        )

    def _register(self, code: int, error: str, description: str) -> None:
        self._templates[code] = ErrorTemplate(code=code, error=error, description=description)

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        # Client errors
        self._register(400, "bad request", "The request is malformed or has invalid parameters")
        self._register(401, "unauthorized", "Authentication is required or has failed")
        self._register(403, "forbidden", "The caller may not access this resource")
        self._register(404, "not found", "The requested resource does not exist")
        self._register(405, "method not allowed", "The method is not supported by this resource")
        self._register(406, "not acceptable", "No representation matches the Accept headers")
        self._register(408, "request timeout", "The client did not send the request in time")
        self._register(409, "conflict", "The request conflicts with the current resource state")
        self._register(410, "gone", "The resource has been permanently removed")
        self._register(411, "length required", "The request must carry a Content-Length")
        self._register(412, "precondition failed", "A request precondition evaluated to false")
        self._register(413, "request entity too large", "The request body exceeds the size limit")
        self._register(415, "unsupported media type", "The request body format is not supported")
        self._register(417, "expectation failed", "The Expect header cannot be met")
        self._register(422, "unprocessable entity", "The request is well formed but semantically invalid")
        self._register(426, "upgrade required", "The client must switch to another protocol")
        self._register(429, "too many requests", "The caller exceeded its rate limit")

        # Server errors
        self._register(500, "internal server error", "An unexpected error occurred")
        self._register(501, "not implemented", "The server does not support this functionality")
        self._register(502, "bad gateway", "An upstream server returned an invalid response")
        self._register(503, "service unavailable", "The service is temporarily unavailable")
        self._register(504, "gateway timeout", "An upstream server did not respond in time")
        self._register(505, "http version not supported", "The HTTP version is not supported")


default_registry = ErrorRegistry()
