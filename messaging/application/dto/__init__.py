"""
DTOs - Data Transfer Objects

Projected records returned by the list queries:
- chat.py → ChatMessageDTO, ChatRoomDTO

Note: These are different from domain entities.
DTOs never carry the deletion marker.
"""

from messaging.application.dto.chat import ChatMessageDTO, ChatRoomDTO

__all__ = [
    "ChatMessageDTO",
    "ChatRoomDTO",
]
