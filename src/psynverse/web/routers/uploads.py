from fastapi import APIRouter, UploadFile
from pydantic import BaseModel, Field

from psynverse.web.deps import AppDep, SessionTokenDep
from psynverse.web.openapi import ErrorResponse

router = APIRouter(tags=["admin-uploads"])


class UploadImageResponse(BaseModel):
    """Uploaded image; ``secure_url`` mirrors ``url`` for dashboard clients that read either."""

    ok: bool = True
    url: str = Field(..., description="Public https URL of the image")
    secure_url: str
    public_id: str
    width: int | None = None
    height: int | None = None


@router.post(
    "/admin/upload",
    summary="Upload image",
    description="Upload an image (5MB max) to the image host and return its public URL. Use `?folder=` for a sub-folder.",
    operation_id="uploadImage",
    responses={
        400: {"model": ErrorResponse, "description": "Not an image"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        413: {"model": ErrorResponse, "description": "Image too large"},
        500: {"model": ErrorResponse, "description": "Image host not configured"},
        502: {"model": ErrorResponse, "description": "Image host failed"},
    },
)
async def upload_image(file: UploadFile, app: AppDep, token: SessionTokenDep, folder: str | None = None) -> UploadImageResponse:
    # At most one byte past the limit
    content = await file.read(app.config.max_upload_bytes + 1)
    uploaded = await app.upload_image(token, content, file.content_type, folder)
    return UploadImageResponse(
        url=uploaded.url,
        secure_url=uploaded.url,
        public_id=uploaded.public_id,
        width=uploaded.width,
        height=uploaded.height,
    )
