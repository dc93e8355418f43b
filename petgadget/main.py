import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from petgadget import config
from petgadget.routers.blog import limiter, router as blog_router
from petgadget.routers.catalog import router as catalog_router
from petgadget.routers.search import router as search_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": config.LOG_LEVEL, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Pet Gadget Insider – Content API",
    description="Article pages for petgadgetinsider.org: sanitized review HTML plus JSON-LD.",
    version="1.0.0",
)

# Blog and search routes share this limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(blog_router)
app.include_router(search_router)
app.include_router(catalog_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"status": "ok", "site": config.SITE_URL}
