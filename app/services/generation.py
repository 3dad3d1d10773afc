import logging
from typing import List, Optional

from app.core.config import Settings
from app.core.errors import ConfigurationError, UpstreamTransportError
from app.schemas.company import CompanyProfile
from app.schemas.generation import (
    Content,
    GenerationConfig,
    GenerationOutcome,
    GenerationRequest,
    Part,
    UpstreamResponse,
)
from app.services.company_store import build_context_block
from app.services.reply_extractor import candidate_texts, extract_reply, first_candidate, finish_reason
from app.utils.gemini_client import call_gemini


logger = logging.getLogger(__name__)


def build_contents(message: str, include_context: bool, profile: Optional[CompanyProfile]) -> List[Content]:
    contents: List[Content] = []
    if include_context and profile:
        contents.append(Content(parts=[Part(text=build_context_block(profile))]))
    contents.append(Content(parts=[Part(text=message)]))
    return contents


def build_request(contents: List[Content], token_budget: int, settings: Settings) -> GenerationRequest:
    # By default the request carries the fixed limit and the budget is only
    # reported; send_token_budget switches the request over to the budget.
    max_tokens = token_budget if settings.send_token_budget else settings.request_max_output_tokens
    return GenerationRequest(
        contents=contents,
        generation_config=GenerationConfig(
            max_output_tokens=max_tokens,
            temperature=settings.temperature,
            candidate_count=1,
        ),
    )


def has_text(response: UpstreamResponse) -> bool:
    return bool(candidate_texts(first_candidate(response.data)))


def generate(
    message: str,
    include_context: bool,
    profile: Optional[CompanyProfile],
    settings: Settings,
) -> GenerationOutcome:
    """Run the bounded retry loop against the generation endpoint.

    Stops on the first attempt with text, on a non-token-limit finish, once the
    budget has reached its cap, or after ``max_attempts``. A non-success HTTP
    status raises ``UpstreamTransportError`` straight away.
    """
    if not settings.upstream_configured:
        raise ConfigurationError(
            "Server not configured: GEMINI_API_URL and/or GEMINI_API_KEY missing. Set them in .env"
        )

    contents = build_contents(message, include_context, profile)
    budget = settings.initial_max_output_tokens
    last: Optional[UpstreamResponse] = None
    attempts = 0

    while attempts < settings.max_attempts:
        attempts += 1
        request = build_request(contents, budget, settings)
        last = call_gemini(
            settings.gemini_api_url,
            settings.gemini_api_key,
            request.to_payload(),
            timeout=settings.upstream_timeout,
        )
        logger.info("Generation attempt %d maxOutputTokens=%d status=%d", attempts, budget, last.status)
        logger.debug("Raw upstream response: %s", last.body)

        if not last.ok:
            raise UpstreamTransportError(last.status, last.body)

        if has_text(last):
            break

        if finish_reason(last.data) == "MAX_TOKENS" and budget < settings.max_output_tokens_limit:
            budget = min(settings.max_output_tokens_limit, budget * 2)
            continue

        break

    reply = extract_reply(last.data if last else None, last.body if last else None)
    return GenerationOutcome(reply=reply, attempts=attempts, used_max_output_tokens=budget)
