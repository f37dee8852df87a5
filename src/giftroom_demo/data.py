"""Demo room definition.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParticipantDef:
    """Definition for a demo participant."""

    first_name: str
    last_name: str
    phone: str
    delivery_info: str
    email: Optional[str] = None
    wish_list: Optional[str] = None
    is_admin: bool = False


DEMO_ROOM_NAME = "Office Secret Santa"

DEMO_PARTICIPANTS: tuple[ParticipantDef, ...] = (
    ParticipantDef(
        first_name="Olena",
        last_name="Koval",
        phone="+380501112233",
        email="olena.koval@example.com",
        delivery_info="Kyiv, Nova Poshta branch 12",
        is_admin=True,
    ),
    ParticipantDef(
        first_name="Taras",
        last_name="Melnyk",
        phone="+380502223344",
        delivery_info="Lviv, Nova Poshta branch 3",
        wish_list="A good paperback thriller",
    ),
    ParticipantDef(
        first_name="Iryna",
        last_name="Bondar",
        phone="+380503334455",
        email="iryna.b@example.com",
        delivery_info="Odesa, Nova Poshta branch 41",
        wish_list="Board games",
    ),
    ParticipantDef(
        first_name="Andrii",
        last_name="Shevchuk",
        phone="+380504445566",
        delivery_info="Dnipro, Nova Poshta branch 7",
    ),
)
