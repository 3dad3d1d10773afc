from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: List[Part]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_output_tokens: int = Field(alias="maxOutputTokens")
    temperature: float = 0.6
    candidate_count: int = Field(default=1, alias="candidateCount")


class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    generation_config: GenerationConfig = Field(alias="generationConfig")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class UpstreamResponse(BaseModel):
    """One HTTP round trip to the generation endpoint.

    ``body`` is the raw text (``None`` when it could not be read) and ``data``
    the parsed JSON (``None`` when the body is empty or not JSON).
    """

    status: int
    ok: bool
    body: Optional[str] = None
    data: Optional[Any] = None


class GenerationOutcome(BaseModel):
    reply: str
    attempts: int
    used_max_output_tokens: int
