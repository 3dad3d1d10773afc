from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, field_validator


class CompanyProfile(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: Optional[str] = None
    aliases: List[str] = []
    website: Optional[str] = None
    description: Optional[str] = None
    products: List[str] = []
    location: Optional[str] = None
    contact: Optional[Any] = None

    @field_validator("aliases", "products", mode="before")
    @classmethod
    def null_list_to_empty(cls, value):
        return [] if value is None else value


class ReloadCompanyResponse(BaseModel):
    ok: bool = True
    loaded: bool
    name: Optional[str] = None
