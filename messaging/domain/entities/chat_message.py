"""
ChatMessage Entity - A single message posted in a chat room.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ChatMessage:
    id: str
    chat_id: str
    text: str
    created_at: datetime
    created_by: str
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
