"""HTTP surface: ``GET /stars``.

All four query parameters are optional and every numeric combination is
accepted; out-of-range values are clamped by
:func:`~star_rating.params.normalize_params`. Responses are PNG bytes served
from :class:`~star_rating.cache.StarCache` when possible. Rendering runs on
the threadpool so the event loop only waits on the cache miss path.

Asset and encoding failures surface as ``500`` with a short JSON body.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from star_rating.cache import StarCache
from star_rating.config import Settings, get_settings
from star_rating.errors import StarRatingError
from star_rating.params import normalize_params
from star_rating.renderer.strip import StripRenderer


PNG_MEDIA_TYPE = "image/png"

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    cache: Optional[StarCache] = None,
    renderer: Optional[StripRenderer] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Process settings; defaults to :func:`get_settings`.
        cache: Rendered strip cache shared by all requests of this app.
        renderer: Strip renderer; defaults to one rooted at
            ``settings.content_root``.

    Returns:
        FastAPI: Application exposing ``GET /stars``.
    """
    if settings is None:
        settings = get_settings()
    app = FastAPI(title="Star Rating")
    app.state.settings = settings
    if cache is None:
        cache = StarCache(ttl=settings.cache_ttl_seconds)
    if renderer is None:
        renderer = StripRenderer(settings.content_root)
    app.state.cache = cache
    app.state.renderer = renderer

    @app.exception_handler(StarRatingError)
    async def render_error_handler(
        request: Request, exc: StarRatingError
    ) -> JSONResponse:
        logger.error("Failed to render %s: %s", request.url, exc, exc_info=exc)
        return JSONResponse(
            status_code=500, content={"detail": "Failed to render star rating"}
        )

    @app.get(
        "/stars",
        response_class=Response,
        responses={200: {"content": {PNG_MEDIA_TYPE: {}}}},
    )
    async def stars(
        request: Request,
        rate: Optional[float] = None,
        space: Optional[int] = None,
        scale: Optional[float] = None,
        count: Optional[int] = None,
    ) -> Response:
        params = normalize_params(rate=rate, scale=scale, space=space, count=count)
        star_cache: StarCache = request.app.state.cache
        strip_renderer: StripRenderer = request.app.state.renderer

        data = await star_cache.get_or_create_async(
            params, lambda: run_in_threadpool(strip_renderer.render_png, params)
        )
        return Response(content=data, media_type=PNG_MEDIA_TYPE)

    return app
