"""Uniform error body returned by every failing request."""

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from app.api.schemas.product import WIRE_DATETIME_FORMAT


class ErrorResponse(BaseModel):
    status: int = Field(..., description="HTTP status code")
    message: str
    details: list[str] = Field(default_factory=list)
    timestamp: datetime
    path: str = Field(..., description="Request path that produced the error")

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.strftime(WIRE_DATETIME_FORMAT)
