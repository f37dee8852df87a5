"""Mapping between ORM models and domain objects."""

from giftroom.domain.room import Room, RoomReference, User
from giftroom.domain.shared.time import ensure_tz_aware
from giftroom.infrastructure.persistence.sqlalchemy.models import RoomModel, UserModel


def user_to_domain(model: UserModel, include_room: bool = False) -> User:
    room_ref = None
    if include_room:
        room_ref = RoomReference(id=model.room.id, name=model.room.name)

    return User(
        id=model.id,
        room_id=model.room_id,
        auth_code=model.auth_code,
        first_name=model.first_name,
        last_name=model.last_name,
        phone=model.phone,
        email=model.email,
        delivery_info=model.delivery_info,
        wish_list=model.wish_list,
        is_admin=model.is_admin,
        room=room_ref,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


def room_to_domain(model: RoomModel) -> Room:
    return Room(
        id=model.id,
        name=model.name,
        users=[user_to_domain(u) for u in model.users],
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )
