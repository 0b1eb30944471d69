# app/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "AccessiDoc"
    env: str = "local"

    # =========================
    # Analysis
    # =========================
    ANALYSIS_BACKEND: str = "gemini"   # "gemini" | "mock"

    # =========================
    # LLM
    # =========================
    GEMINI_API_KEY: str | None = None

    # Default model (override per-call if needed)
    GEMINI_MODEL: str = "gemini-2.5-pro"

    # Runtime controls
    LLM_TIMEOUT_SECONDS: int = 120
    LLM_MAX_OUTPUT_TOKENS: int = 16384
    LLM_TEMPERATURE: float = 0.2

    # Observability
    LLM_LOG_PROMPTS: bool = False  # keep False by default (avoid leaking document text)

    # =========================
    # Uploads
    # =========================
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_EXTENSIONS: str = ".pdf,.doc,.docx"

    # HTTP
    CORS_ALLOW_ORIGINS: str | None = None
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_extensions(self) -> set[str]:
        return {
            e.strip().lower() if e.strip().startswith(".") else "." + e.strip().lower()
            for e in self.ALLOWED_EXTENSIONS.split(",")
            if e.strip()
        }

settings = Settings()
