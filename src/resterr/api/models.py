"""REST error response models."""

from datetime import datetime

from pydantic import BaseModel, Field


class CauseDetail(BaseModel):
    """Field-level error cause."""

    field: str = Field(examples=["email"])
    message: str = Field(examples=["invalid email address"])


class RestErrDetail(BaseModel):
    """Error response body (matches RestErr.to_dict)."""

    message: str = Field(examples=["invalid request parameters"])
    error: str = Field(examples=["bad request"])
    code: int = Field(examples=[400])
    causes: list[CauseDetail] | None = None
    timestamp: datetime
