import json
from typing import Any, List, Optional

NO_REPLY = "(no reply)"
EMPTY_UPSTREAM = "(empty upstream response)"
TRUNCATION_NOTICE = "(Reply truncated — model hit token limit.)\n\n"
DEBUG_DUMP_CHARS = 2000


def _dump(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))[:DEBUG_DUMP_CHARS]


def _is_empty(data: Any) -> bool:
    # null, false, 0 and "" count as "no JSON"; empty objects and arrays do not
    return data is None or (not isinstance(data, (dict, list)) and not data)


def first_candidate(data: Any) -> Optional[dict]:
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
        return candidates[0]
    return None


def candidate_texts(candidate: Optional[dict]) -> List[str]:
    """Non-empty ``content.parts[].text`` values of a candidate, in order."""
    if not candidate:
        return []
    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return []
    return [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str) and p["text"]]


def finish_reason(data: Any) -> Optional[str]:
    cand = first_candidate(data)
    return cand.get("finishReason") if cand else None


def extract_reply(data: Any, raw: Optional[str]) -> str:
    if _is_empty(data):
        if raw:
            return f"Upstream returned non-JSON response: {raw}"
        return EMPTY_UPSTREAM

    reply = None
    if not isinstance(data, dict):
        reply = _dump(data)
    elif isinstance(data.get("candidates"), list) and data["candidates"]:
        cand = data["candidates"][0] if isinstance(data["candidates"][0], dict) else {}
        texts = candidate_texts(cand)
        if texts:
            reply = "\n".join(texts)
        elif cand.get("output_text"):
            reply = str(cand["output_text"])
        else:
            reply = _dump(data["candidates"][0])

        if cand.get("finishReason") == "MAX_TOKENS":
            reply = TRUNCATION_NOTICE + reply
    elif data.get("output_text"):
        reply = str(data["output_text"])
    else:
        reply = _dump(data)

    return reply if reply is not None else NO_REPLY
