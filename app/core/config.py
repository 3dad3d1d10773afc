from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_api_url: str = ""
    always_include_company: bool = False
    company_profile_path: str = "server/data/company.json"
    backend_cors_origins: str = "http://localhost:5173"
    static_dir: str = "dist"
    log_level: str = "INFO"
    port: int = 5174

    # generation / retry
    max_attempts: int = 3
    initial_max_output_tokens: int = 512
    max_output_tokens_limit: int = 2048
    request_max_output_tokens: int = 8192
    temperature: float = 0.6
    send_token_budget: bool = False
    upstream_timeout: Optional[float] = None

    class Config:
        env_file = ".env"
        extra = "allow"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",") if origin.strip()]

    @property
    def upstream_configured(self) -> bool:
        return bool(self.gemini_api_url and self.gemini_api_key)


def get_settings() -> Settings:
    return Settings()
