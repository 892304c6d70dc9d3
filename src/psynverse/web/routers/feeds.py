from fastapi import APIRouter
from fastapi.responses import Response

from psynverse.web.deps import AppDep

router = APIRouter(tags=["feeds"])


@router.get(
    "/rss.xml",
    summary="RSS feed",
    description="RSS 2.0 feed of published posts in display order.",
    operation_id="getRssFeed",
    response_class=Response,
    responses={200: {"content": {"application/rss+xml": {}}}},
)
async def rss_feed(app: AppDep) -> Response:
    return Response(content=await app.get_rss(), media_type="application/rss+xml; charset=utf-8")


@router.get(
    "/sitemap.xml",
    summary="Sitemap",
    description="XML sitemap with the static pages and every published post.",
    operation_id="getSitemap",
    response_class=Response,
    responses={200: {"content": {"application/xml": {}}}},
)
async def sitemap(app: AppDep) -> Response:
    return Response(content=await app.get_sitemap(), media_type="application/xml; charset=utf-8")
