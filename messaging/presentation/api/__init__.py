"""
API Routers - FastAPI endpoint definitions.
"""

from messaging.presentation.api.chats import router as chats_router

__all__ = [
    "chats_router",
]
