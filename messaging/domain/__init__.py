"""
DOMAIN LAYER - Chat rooms and their messages

This layer contains:
- Entities: ChatMessage, ChatRoom
- Value Objects: ChatRoomId, UserId, PageWindow, SortOrder, query criteria
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
