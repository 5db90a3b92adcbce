"""Recover RestErrs from arbitrary exception chains."""

import logging
from collections.abc import Iterator

from resterr.config.models import RestErrConfig

from .errors import RestErr
from .registry import default_registry

logger = logging.getLogger(__name__)


def _links(err: BaseException) -> list[BaseException]:
    """Direct links of one chain node, in walk order."""
    links: list[BaseException] = []
    if isinstance(err, RestErr) and err.wrapped is not None:
        links.append(err.wrapped)
    if err.__cause__ is not None:
        links.append(err.__cause__)
    if isinstance(err, BaseExceptionGroup):
        links.extend(err.exceptions)
    return links


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Walk an exception chain depth-first, starting with err itself.

    Follows explicit links only: RestErr.wrapped, __cause__ and the members
    of exception groups. An implicit __context__ (an error that was being
    handled) is not followed. Each exception is yielded once.
    """
    if err is None:
        return
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(_links(current)))


def parse_error(err: BaseException | None) -> tuple[RestErr | None, bool]:
    """Find the first RestErr in an exception chain.

    Args:
        err: Exception to inspect, may be None

    Returns:
        (RestErr, True) if found, (None, False) otherwise
    """
    for current in iter_chain(err):
        if isinstance(current, RestErr):
            return current, True
    return None, False


def from_error(err: BaseException | None, config: RestErrConfig | None = None) -> RestErr | None:
    """Convert any exception to RestErr.

    A RestErr found anywhere in the chain is returned unchanged. Anything
    else becomes an internal server error carrying the generic message, with
    err attached as its cause.

    Args:
        err: Exception to convert, may be None
        config: Conversion settings (defaults to RestErrConfig())

    Returns:
        RestErr instance, or None if err is None
    """
    if err is None:
        return None

    rest_err, found = parse_error(err)
    if found:
        return rest_err

    config = config or RestErrConfig()
    if config.log_conversions:
        logger.debug("Converting %s to internal server error: %s", type(err).__name__, err)
    return default_registry.create(500, config.generic_message).with_cause(err)
