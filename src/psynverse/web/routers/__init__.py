from psynverse.web.routers.auth import router as auth_router
from psynverse.web.routers.books import router as books_router
from psynverse.web.routers.feeds import router as feeds_router
from psynverse.web.routers.posts import router as posts_router
from psynverse.web.routers.public import router as public_router
from psynverse.web.routers.uploads import router as uploads_router

__all__ = [
    "auth_router",
    "books_router",
    "feeds_router",
    "posts_router",
    "public_router",
    "uploads_router",
]
