"""
Caller Identity Dependency for FastAPI.

The service sits behind a gateway that has already authenticated the
caller and forwards the established user id in the X-User-Id header.
No token is validated here.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Header


@dataclass
class CallerIdentity:
    id: str

    def as_user(self) -> dict[str, Any]:
        """Boundary shape expected by the user-scoped queries."""
        return {"_id": self.id}


async def get_current_user(
    x_user_id: str = Header(..., min_length=1),
) -> CallerIdentity:
    return CallerIdentity(id=x_user_id)
