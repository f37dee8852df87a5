from giftroom.presentation.api.routers.rooms import router as rooms_router
from giftroom.presentation.api.routers.users import router as users_router

__all__ = [
    "rooms_router",
    "users_router",
]
