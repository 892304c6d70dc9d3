from fastapi import APIRouter
from pydantic import Field

from psynverse.core.modules.post.models import Post, PostInput
from psynverse.errors import ValidationError
from psynverse.web.deps import AppDep, SessionTokenDep
from psynverse.web.openapi import CamelModel, ErrorResponse, OkResponse

router = APIRouter(tags=["admin-posts"])


class SavePostRequest(CamelModel):
    """Post fields plus the slug of the post being edited, if any."""

    post: PostInput = Field(..., description="Post fields; tags may be a list or a comma-separated string")
    original_slug: str | None = Field(None, description="Slug of the post being edited; differs from the new slug on rename")


class SavePostResponse(OkResponse):
    post: Post
    blog_order: list[str]


class BlogOrderResponse(OkResponse):
    blog_order: list[str]


class SaveOrderRequest(CamelModel):
    blog_order: list[str] = Field(..., description="Post slugs in the desired display order")


@router.get(
    "/admin/posts",
    summary="List all posts",
    description="All posts, drafts included, in display order.",
    operation_id="listAdminPosts",
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def list_posts(app: AppDep, token: SessionTokenDep) -> list[Post]:
    return await app.get_all_posts(token)


@router.get(
    "/admin/posts/{slug}",
    summary="Get post",
    description="Get a single post by slug, drafts included.",
    operation_id="getAdminPost",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def get_post(slug: str, app: AppDep, token: SessionTokenDep) -> Post:
    return await app.get_admin_post(token, slug)


@router.post(
    "/admin/posts",
    summary="Create post",
    description="Create a post. The slug is derived from the title when not given; new posts go to the front of the order.",
    operation_id="createPost",
    responses={
        400: {"model": ErrorResponse, "description": "Missing title, date, excerpt or usable slug"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Post named by originalSlug not found"},
        409: {"model": ErrorResponse, "description": "Slug already taken"},
    },
)
async def create_post(req: SavePostRequest, app: AppDep, token: SessionTokenDep) -> SavePostResponse:
    post, blog_order = await app.save_post(token, req.post, req.original_slug)
    return SavePostResponse(post=post, blog_order=blog_order)


@router.put(
    "/admin/posts",
    summary="Update or rename post",
    description="Update the post named by originalSlug; a different slug in the payload renames it in place of the order.",
    operation_id="updatePost",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload or missing originalSlug"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Post not found"},
        409: {"model": ErrorResponse, "description": "New slug already taken"},
    },
)
async def update_post(req: SavePostRequest, app: AppDep, token: SessionTokenDep) -> SavePostResponse:
    if not (req.original_slug and req.original_slug.strip()):
        raise ValidationError("originalSlug is required")
    post, blog_order = await app.save_post(token, req.post, req.original_slug)
    return SavePostResponse(post=post, blog_order=blog_order)


@router.delete(
    "/admin/posts/{slug}",
    summary="Delete post",
    description="Delete a post and remove it from the display order.",
    operation_id="deletePost",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid slug"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def delete_post(slug: str, app: AppDep, token: SessionTokenDep) -> BlogOrderResponse:
    blog_order = await app.delete_post(token, slug)
    return BlogOrderResponse(blog_order=blog_order)


@router.post(
    "/admin/save-order",
    summary="Save post order",
    description="Replace the display order of posts. Entries are sanitized; unknown slugs are dropped.",
    operation_id="saveBlogOrder",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def save_order(req: SaveOrderRequest, app: AppDep, token: SessionTokenDep) -> BlogOrderResponse:
    blog_order = await app.save_blog_order(token, req.blog_order)
    return BlogOrderResponse(blog_order=blog_order)
