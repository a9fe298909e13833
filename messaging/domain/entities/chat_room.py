"""
ChatRoom Entity - A conversation between a host and a customer about a booking.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ChatRoom:
    # Required fields (no defaults) - must come first
    id: str
    host_id: str
    customer_id: str
    created_at: datetime
    updated_at: datetime
    # Optional fields (with defaults) - must come last
    booking_id: Optional[str] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def has_participant(self, user_id: str) -> bool:
        return user_id in (self.host_id, self.customer_id)
