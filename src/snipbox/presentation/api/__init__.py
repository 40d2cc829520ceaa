"""HTTP presentation layer for snipbox.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── context.py            # Application context built at startup
    ├── dependencies.py       # Dependency injection
    ├── session_middleware.py # Server-side session cookie handling
    ├── routers/              # Route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from snipbox.presentation.api.app import create_app

__all__ = ["create_app"]
