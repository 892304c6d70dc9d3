from fastapi import APIRouter
from fastapi.responses import FileResponse
from pydantic import Field

from psynverse.core.modules.book.models import Book, BookInput
from psynverse.web.deps import AppDep, SessionTokenDep
from psynverse.web.openapi import CamelModel, ErrorResponse, OkResponse

router = APIRouter(tags=["admin-books"])


class SaveBooksRequest(CamelModel):
    books: list[BookInput] = Field(..., description="The complete book list in display order")


class SaveBooksResponse(OkResponse):
    books: list[Book]
    book_order: list[str]


class UpdateBookImageRequest(CamelModel):
    image: str = Field(..., description="https URL of the cover image")


class UpdateBookImageResponse(OkResponse):
    id: str
    image: str


@router.get(
    "/admin/books",
    summary="List books",
    description="All books in display order.",
    operation_id="listAdminBooks",
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def list_books(app: AppDep, token: SessionTokenDep) -> list[Book]:
    return await app.get_admin_books(token)


@router.post(
    "/admin/books",
    summary="Replace book list",
    description="Store exactly the submitted books: missing ones are deleted and the submitted order becomes the display order.",
    operation_id="saveBooks",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid payload, duplicate ids or non-https image"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def save_books(req: SaveBooksRequest, app: AppDep, token: SessionTokenDep) -> SaveBooksResponse:
    books, book_order = await app.save_books(token, req.books)
    return SaveBooksResponse(books=books, book_order=book_order)


@router.patch(
    "/admin/books/{book_id}/image",
    summary="Set book cover",
    description="Point a book at a new cover image. Only https URLs are accepted.",
    operation_id="updateBookImage",
    responses={
        400: {"model": ErrorResponse, "description": "Not a valid https URL"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)
async def update_book_image(
    book_id: str, req: UpdateBookImageRequest, app: AppDep, token: SessionTokenDep
) -> UpdateBookImageResponse:
    image = await app.update_book_image(token, book_id, req.image)
    return UpdateBookImageResponse(id=book_id.strip(), image=image)


@router.get(
    "/admin/books/images/{filename}",
    summary="Download book cover",
    description="Serve a locally stored book cover. Only plain file names inside the image directory resolve.",
    operation_id="downloadBookImage",
    responses={
        200: {"description": "Image file"},
        404: {"model": ErrorResponse, "description": "Image not found"},
    },
)
async def download_book_image(filename: str, app: AppDep) -> FileResponse:
    image = app.get_book_image(filename)
    return FileResponse(path=image.file_path, media_type=image.media_type)
