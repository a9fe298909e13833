"""Chat DTOs - the projections read from the record stores."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional


class ChatMessageDTO(BaseModel):
    """A message as listed in a chat room (deletion marker excluded)."""

    id: str
    chat_id: str
    text: str
    created_at: datetime
    created_by: str


class ChatRoomDTO(BaseModel):
    """A chat room as listed for one of its participants."""

    id: str
    booking_id: Optional[str] = None
    host_id: str
    customer_id: str
    created_at: datetime
    updated_at: datetime


# Fields requested from the stores, in DTO order
MESSAGE_PROJECTION: tuple[str, ...] = tuple(ChatMessageDTO.model_fields)
CHAT_ROOM_PROJECTION: tuple[str, ...] = tuple(ChatRoomDTO.model_fields)
