"""Paginated chat message and chat room queries."""
