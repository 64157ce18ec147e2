from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경변수 / .env 기반 애플리케이션 설정"""

    environment: Literal["development", "production"] = "development"
    port: int = 3000

    # CORS (쉼표로 구분)
    allowed_origins: str = "*"

    # Gemini
    gemini_api_key: str = ""
    gemini_extraction_model: str = "gemini-2.5-flash"
    gemini_generation_model: str = "gemini-2.5-flash"
    extraction_max_output_tokens: int = 4000
    generation_temperature: float = 0.7

    # PDF 다운로드 제한
    pdf_download_timeout: float = 30.0
    pdf_max_bytes: int = 20 * 1024 * 1024

    # 인증 (supabase: Supabase Auth로 검증, passthrough: 토큰 미검증 호환 모드로 명시적으로 켜야 함)
    auth_verification: Literal["passthrough", "supabase"] = "supabase"
    supabase_url: str = ""
    supabase_anon_key: str = ""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def allowed_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
