"""
Error Envelope

Business and validation failures are answered with a list of
human-readable messages:

    {"errors": ["ISBN already registered."]}
"""

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field


class ApiErrors(BaseModel):
    """Body of a 400 response."""

    errors: list[str] = Field(
        ...,
        description="One message per violated rule or invalid field",
        examples=[["ISBN already registered."]],
    )

    @classmethod
    def of(cls, message: str) -> "ApiErrors":
        return cls(errors=[message])

    @classmethod
    def from_validation_error(cls, exc: RequestValidationError) -> "ApiErrors":
        """One "field: message" entry per pydantic error, body prefix dropped."""
        messages = []
        for error in exc.errors():
            location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            prefix = ".".join(location)
            messages.append(f"{prefix}: {error['msg']}" if prefix else error["msg"])
        return cls(errors=messages)
