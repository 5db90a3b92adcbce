"""REST error configuration data models."""

from dataclasses import dataclass


@dataclass
class RestErrConfig:
    """How unclassified errors are converted and how errors serialize."""

    generic_message: str = "An unexpected error occurred"
    omit_empty_causes: bool = True
    log_conversions: bool = True
