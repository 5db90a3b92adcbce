"""Named constructors for REST errors, one per HTTP status.

Messages accept printf-style arguments, formatted once at construction::

    new_not_found_error("user %s not found", user_id)

Validation variants take the field-level causes before the arguments::

    new_bad_request_validation_error(
        "invalid request", [Cause(field="email", message="invalid email format")]
    )
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import Cause, RestErr
from .registry import default_registry

CauseInput = Iterable[Cause | Mapping[str, Any]] | None


def format_message(message: str, *args: Any) -> str:
    """Format message with printf-style args. Without args it is returned as-is."""
    if args:
        return message % args
    return message


def new_rest_err(
    message: str,
    error: str | None,
    code: int,
    causes: CauseInput = None,
) -> RestErr:
    """Create an error for any registered status.

    Args:
        message: Human-readable message (not formatted)
        error: Error class; None to use the one registered for code
        code: HTTP status code
        causes: Optional field-level causes

    Returns:
        RestErr instance

    Raises:
        ValueError: If code is not registered or error does not match it
    """
    registered = default_registry.error_for(code)
    if error is not None and error != registered:
        msg = f"Error class {error!r} does not match status {code} ({registered!r})"
        raise ValueError(msg)
    return default_registry.create(code, message, causes)


def _new(code: int, message: str, args: tuple[Any, ...], causes: CauseInput = None) -> RestErr:
    return default_registry.create(code, format_message(message, *args), causes)


# 4xx


def new_bad_request_error(message: str, *args: Any) -> RestErr:
    return _new(400, message, args)


def new_bad_request_validation_error(message: str, causes: CauseInput, *args: Any) -> RestErr:
    return _new(400, message, args, causes)


def new_unauthorized_error(message: str, *args: Any) -> RestErr:
    return _new(401, message, args)


def new_forbidden_error(message: str, *args: Any) -> RestErr:
    return _new(403, message, args)


def new_not_found_error(message: str, *args: Any) -> RestErr:
    return _new(404, message, args)


def new_method_not_allowed_error(message: str, *args: Any) -> RestErr:
    return _new(405, message, args)


def new_not_acceptable_error(message: str, *args: Any) -> RestErr:
    return _new(406, message, args)


def new_request_timeout_error(message: str, *args: Any) -> RestErr:
    return _new(408, message, args)


def new_conflict_error(message: str, *args: Any) -> RestErr:
    return _new(409, message, args)


def new_conflict_validation_error(message: str, causes: CauseInput, *args: Any) -> RestErr:
    return _new(409, message, args, causes)


def new_gone_error(message: str, *args: Any) -> RestErr:
    return _new(410, message, args)


def new_length_required_error(message: str, *args: Any) -> RestErr:
    return _new(411, message, args)


def new_precondition_failed_error(message: str, *args: Any) -> RestErr:
    return _new(412, message, args)


def new_request_entity_too_large_error(message: str, *args: Any) -> RestErr:
    return _new(413, message, args)


def new_unsupported_media_type_error(message: str, *args: Any) -> RestErr:
    return _new(415, message, args)


def new_expectation_failed_error(message: str, *args: Any) -> RestErr:
    return _new(417, message, args)


def new_unprocessable_entity_error(message: str, causes: CauseInput, *args: Any) -> RestErr:
    return _new(422, message, args, causes)


def new_upgrade_required_error(message: str, *args: Any) -> RestErr:
    return _new(426, message, args)


def new_too_many_requests_error(message: str, *args: Any) -> RestErr:
    return _new(429, message, args)


# 5xx


def new_internal_server_error(message: str, *args: Any) -> RestErr:
    return _new(500, message, args)


def new_not_implemented_error(message: str, *args: Any) -> RestErr:
    return _new(501, message, args)


def new_bad_gateway_error(message: str, *args: Any) -> RestErr:
    return _new(502, message, args)


def new_service_unavailable_error(message: str, *args: Any) -> RestErr:
    return _new(503, message, args)


def new_gateway_timeout_error(message: str, *args: Any) -> RestErr:
    return _new(504, message, args)


def new_http_version_not_supported_error(message: str, *args: Any) -> RestErr:
    return _new(505, message, args)
