"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the use cases need,
without specifying HOW it's done.

- Use cases say: "I need a count and a page of chat messages"
- Infrastructure implements: "I'll use PostgreSQL via Prisma"

Subfolders:
- repositories/  → Record store interfaces
"""
