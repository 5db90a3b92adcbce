"""resterr - Structured, HTTP-status-aware API errors.

Errors carry a message, a short error class, the HTTP status code, optional
field-level causes and a creation timestamp. They serialize to a JSON
response body and interoperate with Python exception chaining.
"""

from resterr.config import RestErrConfig
from resterr.errors import Cause, RestErr, from_error, parse_error

__version__ = "1.0.0"
__all__ = ["__version__", "Cause", "RestErr", "RestErrConfig", "from_error", "parse_error"]
