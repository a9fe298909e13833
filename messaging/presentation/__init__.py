"""
PRESENTATION LAYER - HTTP surface

- api/          → FastAPI routers
- dependencies/ → Request-scoped FastAPI dependencies (caller identity)
"""
