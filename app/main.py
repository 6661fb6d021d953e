import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.config import settings
from app.core.errors import PromptStashError
from app.modules.auth import routes as auth_routes
from app.modules.teams import routes as teams_routes
from app.modules.folders import routes as folders_routes
from app.modules.tags import routes as tags_routes
from app.modules.prompts import routes as prompts_routes
from app.modules.shares import routes as shares_routes
from app.modules.versions import routes as versions_routes
from app.modules.public import routes as public_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(PromptStashError)
async def promptstash_exception_handler(request: Request, exc: PromptStashError):
    if exc.status_code >= 500:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"Referrer-Policy", b"no-referrer"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


# Applies default_limits to every route not marked @limiter.exempt
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(teams_routes.router, prefix="/api/v1")
app.include_router(folders_routes.router, prefix="/api/v1")
app.include_router(tags_routes.router, prefix="/api/v1")
app.include_router(prompts_routes.router, prefix="/api/v1")
app.include_router(shares_routes.router, prefix="/api/v1")
app.include_router(versions_routes.router, prefix="/api/v1")
app.include_router(public_routes.router, prefix="/api/v1")
app.include_router(public_routes.page_router)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url=settings.app_root_path, status_code=307)


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness check: extend here with a Supabase round trip if needed."""
    return {"status": "ready"}
