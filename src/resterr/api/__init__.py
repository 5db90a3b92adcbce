"""REST error wire models."""

from .models import CauseDetail, RestErrDetail

__all__ = ["CauseDetail", "RestErrDetail"]
