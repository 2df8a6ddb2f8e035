"""Request and response schemas for the main view endpoints."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class LocaleChangeRequest(BaseModel):
    locale: str = Field(..., description="Language tag chosen in the selector")


class GreetRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)


class ViewUpdateResponse(BaseModel):
    """Changes the browser applies to the rendered view."""

    locale: str
    labels: Dict[str, str] = Field(default_factory=dict)
    notifications: List[str] = Field(default_factory=list)
    reload: bool = False


class ErrorResponse(BaseModel):
    message: str
