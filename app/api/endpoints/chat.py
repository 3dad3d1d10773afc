import logging
from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_app_settings, get_company_store
from app.core.config import Settings
from app.core.errors import ValidationError
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.company_store import CompanyProfileStore
from app.services.generation import generate
from app.services.relevance import should_include_company

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse, response_model_by_alias=True)
def chat(
    req: Optional[ChatRequest] = None,
    settings: Settings = Depends(get_app_settings),
    store: CompanyProfileStore = Depends(get_company_store),
):
    message = req.message if req else None
    if not message:
        raise ValidationError("`message` is required")

    profile = store.profile
    include_company = should_include_company(message, profile, settings.always_include_company)
    logger.info("[CHAT] includeCompany=%s", include_company)

    outcome = generate(message, include_company, profile, settings)
    return ChatResponse(
        reply=outcome.reply,
        included_company=include_company,
        attempts=outcome.attempts,
        used_max_output_tokens=outcome.used_max_output_tokens,
    )
