"""
ChatRoomId Value Object - Opaque chat room identity.
"""

from dataclasses import dataclass

from messaging.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ChatRoomId:
    value: str  # chat room id, opaque string assigned by the store

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidArgumentError("chat room ID required")

    def __str__(self) -> str:
        return self.value
