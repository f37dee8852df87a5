"""Error and health payloads."""

from pydantic import BaseModel, ConfigDict, Field


class FieldErrorResponse(BaseModel):
    """One failed check on a request field."""

    field: str = Field(..., description="Request field the error refers to")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response produced by the exception handlers."""

    detail: str = Field(..., description="All error messages, joined")
    code: str | None = Field(
        None,
        description="NOT_FOUND, NOT_AUTHORIZED, BAD_REQUEST or INTERNAL_ERROR",
    )
    errors: list[FieldErrorResponse] = Field(
        default_factory=list,
        description="Per-field validation errors",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "User with userCode is not administrator.",
                "code": "NOT_AUTHORIZED",
                "errors": [
                    {
                        "field": "userCode",
                        "message": "User with userCode is not administrator.",
                    }
                ],
            },
        },
    )


class HealthResponse(BaseModel):
    status: str = Field(..., description="Always 'healthy' when the app responds")
    version: str = Field(..., description="API version")
