import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.endpoints import chat
from app.api.endpoints import company
from app.core.config import Settings
from app.core.errors import ChatError
from app.services.company_store import CompanyProfileStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set.")
    if not settings.gemini_api_url:
        logger.warning("GEMINI_API_URL not set.")

    app = FastAPI(title="Company Chat")
    app.state.settings = settings
    app.state.company_store = CompanyProfileStore(settings.company_profile_path)
    app.state.company_store.load()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ChatError)
    async def chat_error_handler(request: Request, exc: ChatError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Server error in %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(chat.router, prefix="/api", tags=["chat"])
    app.include_router(company.router, prefix="/api", tags=["company"])

    # built frontend, when present; mounted last so /api routes win
    if settings.static_dir and os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()
