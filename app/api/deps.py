from fastapi import Request

from app.core.config import Settings
from app.services.company_store import CompanyProfileStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_company_store(request: Request) -> CompanyProfileStore:
    return request.app.state.company_store
