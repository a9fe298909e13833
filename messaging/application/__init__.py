"""
APPLICATION LAYER - Use Cases

This layer contains:
- queries/  → Read operations (CQRS): chat messages, user chats
- dto/      → Data Transfer Objects (projected records)
- common/   → Query base classes, pagination and read-failure policies

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
