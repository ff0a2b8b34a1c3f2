"""Error body returned by every failing REST call."""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    timestamp: datetime = Field(default_factory=datetime.now)
    status: int = Field(..., examples=[404])
    error: str = Field(..., examples=["Not Found"])
    message: str = Field(..., examples=["record not found"])
    path: str = Field(..., examples=["/api/restaurants/42"])
