from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    included_company: bool = Field(alias="includedCompany")
    attempts: int
    used_max_output_tokens: int = Field(alias="usedMaxOutputTokens")
