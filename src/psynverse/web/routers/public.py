from fastapi import APIRouter

from psynverse.core.modules.book.models import Book
from psynverse.core.modules.post.models import Post
from psynverse.web.deps import AppDep
from psynverse.web.openapi import ErrorResponse

router = APIRouter(tags=["public"])


@router.get(
    "/posts",
    summary="List published posts",
    description="Published posts in the curated display order; posts missing from it follow, newest first.",
    operation_id="listPosts",
)
async def list_posts(app: AppDep) -> list[Post]:
    return await app.get_published_posts()


@router.get(
    "/posts/{slug}",
    summary="Get post",
    description="Get a published post by slug.",
    operation_id="getPost",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
async def get_post(slug: str, app: AppDep) -> Post:
    return await app.get_published_post(slug)


@router.get(
    "/books",
    summary="List books",
    description="Books in the curated display order.",
    operation_id="listBooks",
)
async def list_books(app: AppDep) -> list[Book]:
    return await app.get_books()
