import json
import logging
from typing import Any, Dict, Optional

import requests
from app.schemas.generation import UpstreamResponse


logger = logging.getLogger(__name__)


def call_gemini(
    url: str,
    api_key: str,
    payload: Dict[str, Any],
    timeout: Optional[float] = None,
) -> UpstreamResponse:
    """POST a generateContent payload and return the response uninterpreted.

    Non-2xx statuses are returned, not raised; the caller decides what a
    transport failure means. Connection-level failures propagate as
    ``requests.RequestException``.
    """
    try:
        response = requests.post(
            url,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": api_key,
            },
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.error("Gemini request failed: %s", exc)
        raise

    body = response.text

    data = None
    if body:
        try:
            data = json.loads(body)
        except ValueError:
            data = None

    ok = 200 <= response.status_code < 300
    return UpstreamResponse(status=response.status_code, ok=ok, body=body, data=data)
