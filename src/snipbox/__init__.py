"""Snipbox - share short-lived text snippets.

Core packages:
- domain: snippet aggregate, shared exceptions and time helpers
- application: forms, session management, orchestration services
- infrastructure: SQLAlchemy and in-memory persistence
- presentation: FastAPI application and typer CLI

Identity concerns (users, credentials) live in snipbox_identity.
"""
