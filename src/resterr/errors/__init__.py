"""REST errors - Structured HTTP errors with cause chains."""

from .errors import (
    Cause,
    RestErr,
    is_client_error_status,
    is_server_error_status,
    normalize_causes,
)
from .registry import ErrorRegistry, ErrorTemplate, default_registry
from .constructors import (
    format_message,
    new_bad_gateway_error,
    new_bad_request_error,
    new_bad_request_validation_error,
    new_conflict_error,
    new_conflict_validation_error,
    new_expectation_failed_error,
    new_forbidden_error,
    new_gateway_timeout_error,
    new_gone_error,
    new_http_version_not_supported_error,
    new_internal_server_error,
    new_length_required_error,
    new_method_not_allowed_error,
    new_not_acceptable_error,
    new_not_found_error,
    new_not_implemented_error,
    new_precondition_failed_error,
    new_request_entity_too_large_error,
    new_request_timeout_error,
    new_rest_err,
    new_service_unavailable_error,
    new_too_many_requests_error,
    new_unauthorized_error,
    new_unprocessable_entity_error,
    new_unsupported_media_type_error,
    new_upgrade_required_error,
)
from .factory import from_error, iter_chain, parse_error

__all__ = [
    # Core error types
    "RestErr",
    "Cause",
    "normalize_causes",
    "is_client_error_status",
    "is_server_error_status",
    # Registry
    "ErrorRegistry",
    "ErrorTemplate",
    "default_registry",
    # Constructors
    "format_message",
    "new_rest_err",
    "new_bad_request_error",
    "new_bad_request_validation_error",
    "new_unauthorized_error",
    "new_forbidden_error",
    "new_not_found_error",
    "new_method_not_allowed_error",
    "new_not_acceptable_error",
    "new_request_timeout_error",
    "new_conflict_error",
    "new_conflict_validation_error",
    "new_gone_error",
    "new_length_required_error",
    "new_precondition_failed_error",
    "new_request_entity_too_large_error",
    "new_unsupported_media_type_error",
    "new_expectation_failed_error",
    "new_unprocessable_entity_error",
    "new_upgrade_required_error",
    "new_too_many_requests_error",
    "new_internal_server_error",
    "new_not_implemented_error",
    "new_bad_gateway_error",
    "new_service_unavailable_error",
    "new_gateway_timeout_error",
    "new_http_version_not_supported_error",
    # Chain recovery
    "iter_chain",
    "parse_error",
    "from_error",
]
