# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details body returned by every error handler.

    See https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str = Field(default="about:blank")
    title: str = Field(description="Short summary of the HTTP status.")
    status: int
    detail: str = ""
    request_id: str = Field(
        default="",
        description="Taken from the x-request-id header, or generated.",
    )
