"""API documentation routes.

Paths depend on configuration, so the router is assembled per application
rather than declared with decorators. None of these routes appear in the
OpenAPI document itself.
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from app.services.swagger_assets import AssetResolutionError
from config import Settings


async def serve_api_description(request: Request) -> JSONResponse:
    """Return the OpenAPI document built at startup."""
    return JSONResponse(content=request.app.state.api_description)


async def serve_swagger(tail: str, request: Request) -> Response:
    """Serve a Swagger UI asset, 404 when unknown."""
    try:
        asset = request.app.state.swagger_assets.resolve(tail)
    except AssetResolutionError as exc:
        return PlainTextResponse(str(exc), status_code=500)

    if asset is None:
        return Response(status_code=404)
    return Response(content=asset.content, media_type=asset.content_type)


def build_docs_router(settings: Settings) -> APIRouter:
    """Create the documentation routes for the configured URLs."""
    router = APIRouter(include_in_schema=False)
    swagger_path = settings.swagger_path.rstrip("/")
    index_url = settings.swagger_index_url

    async def redirect_to_swagger() -> RedirectResponse:
        return RedirectResponse(url=index_url, status_code=303)

    router.add_api_route("/", redirect_to_swagger, methods=["GET"])
    router.add_api_route(settings.openapi_url, serve_api_description, methods=["GET"])
    router.add_api_route(f"{swagger_path}/{{tail:path}}", serve_swagger, methods=["GET"])
    return router
