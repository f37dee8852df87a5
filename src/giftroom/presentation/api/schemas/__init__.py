from giftroom.presentation.api.schemas.common import (
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
)
from giftroom.presentation.api.schemas.room import ParticipantResponse, RoomResponse

__all__ = [
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
    "ParticipantResponse",
    "RoomResponse",
]
