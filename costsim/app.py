import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from costsim.core.validation import MalformedInputError
from costsim.routes import simulate

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Cost Sheet Simulator API", version="0.1.0")

    level = (os.getenv("COSTSIM_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))

    origins_env = os.getenv("API_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in origins_env.split(",") if origin.strip()]
    if not origins:
        origins = ["http://localhost:5173", "http://127.0.0.1:5173", "http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(simulate.router, prefix="/api")

    @app.exception_handler(MalformedInputError)
    async def malformed_input(request: Request, exc: MalformedInputError) -> JSONResponse:
        logger.warning("rejected payload for %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"ok": False, "error": str(exc)})

    @app.get("/api/health", include_in_schema=False)
    async def health() -> dict:
        return {"ok": True}

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Provide a lightweight landing page for container checks."""
        return JSONResponse(
            {
                "message": "Cost Sheet Simulator API",
                "docs": "/docs",
                "health": "/api/health",
            }
        )

    return app


app = create_app()
