"""
INFRASTRUCTURE LAYER - Repository implementations

- persistence/ → Prisma (PostgreSQL) repositories
- memory/      → In-memory repositories for tests and local runs
"""
