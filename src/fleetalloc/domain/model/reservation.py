"""Reservation: a temporary hold against spare-part stock.

A reservation lowers reported availability without touching physical
stock. It lives until the caller commits it (stock is drawn through the
ledger) or releases it (the hold simply disappears).
"""

from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fleetalloc.domain.exceptions import ValidationError

_ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_reservation_id() -> str:
    """Return an id such as ``RSV-7K2M9QXA1B-1718000000``."""
    token = "".join(secrets.choice(_ID_ALPHABET) for _ in range(10))
    return f"RSV-{token}-{int(time.time())}"


@dataclass
class Reservation:
    id: str
    lines: dict[int, int] = field(default_factory=dict)  # part_id -> held quantity
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def hold(self, part_id: int, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        self.lines[part_id] = self.lines.get(part_id, 0) + quantity

    def held_quantity(self, part_id: int) -> int:
        return self.lines.get(part_id, 0)

    @property
    def is_empty(self) -> bool:
        return not self.lines
