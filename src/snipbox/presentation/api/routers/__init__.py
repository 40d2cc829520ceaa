from snipbox.presentation.api.routers.account import router as account_router
from snipbox.presentation.api.routers.snippets import router as snippets_router
from snipbox.presentation.api.routers.users import router as users_router

__all__ = [
    "account_router",
    "snippets_router",
    "users_router",
]
