from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from psynverse.core.modules.session.models import COOKIE_NAME


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Psynverse API",
            version="0.1.0",
            summary="Blog, book list and admin dashboard backend",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": COOKIE_NAME,
                "description": "Signed admin session token set by /api/admin/login",
            },
        }

        # Only the admin API is protected
        for path, path_item in openapi_schema.get("paths", {}).items():
            for operation in path_item.values():
                is_admin = path.startswith("/api/admin/") and path not in PUBLIC_ADMIN_PATHS
                operation["security"] = [{"SessionCookie": []}] if is_admin else []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


PUBLIC_ADMIN_PATHS = {
    "/api/admin/login",
    "/api/admin/logout",
    "/api/admin/books/images/{filename}",
}


class CamelModel(BaseModel):
    """API model exchanged with the admin dashboard in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OkResponse(CamelModel):
    ok: bool = Field(True, description="Operation succeeded")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid credentials", "type": "authentication_error"},
                {"message": "Post not found", "type": "not_found"},
                {"message": "A post with this slug already exists.", "type": "conflict"},
            ]
        }
    }
