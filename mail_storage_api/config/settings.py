# mail_storage_api/config/settings.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # ⚠️ placeholders inseguros: defina SMTP_* no ambiente em produção
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str = "your-email@gmail.com"
    smtp_pass: str = "your-app-password"
    smtp_secure: bool = False
    smtp_timeout_seconds: float = 30.0
    mail_from: str | None = None

    uploads_dir: str = "./uploads"
    max_upload_size_mb: int = 10
    # "timestamp" (<ms>-<random>-<nome>) ou "uuid"
    stored_name_strategy: str = "timestamp"
    strict_storage_paths: bool = False

    cors_origins: str = "*"
    public_dir: str = "./public"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "smtp_host", "smtp_user", "smtp_pass", "uploads_dir", "public_dir", mode="before"
    )
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("stored_name_strategy")
    @classmethod
    def check_strategy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("timestamp", "uuid"):
            raise ValueError("stored_name_strategy must be 'timestamp' or 'uuid'")
        return v

    @property
    def max_upload_bytes(self) -> int:
        return max(1, self.max_upload_size_mb) * 1024 * 1024

    @property
    def sender_address(self) -> str:
        return self.mail_from or self.smtp_user

    @property
    def cors_origins_list(self) -> list[str] | str:
        raw = (self.cors_origins or "").strip()
        if not raw or raw == "*":
            return "*"
        return [p.strip() for p in raw.split(",") if p.strip()]


settings = Settings()
