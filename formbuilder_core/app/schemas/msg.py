from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: Optional[str] = None
