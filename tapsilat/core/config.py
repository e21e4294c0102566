from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError

# .env proje kökünde: tapsilat/core/config.py -> tapsilat/core -> tapsilat -> kök
_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _ROOT / ".env"

DEFAULT_BASE_URL = "https://panel.tapsilat.dev/api/v1"


class Settings(BaseSettings):
    api_key: str = ""
    # Ortam değişkeni: TAPSILAT_BASE_URL (staging için farklı adres verilebilir)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0              # HTTP istek zaman aşımı (saniye)
    # Webhook imzası için paylaşılan gizli anahtar (Tapsilat panelinden)
    webhook_secret: str = ""
    # Boşsa zaman damgası kontrolü yapılmaz; örn. 300 = 5 dakika
    webhook_tolerance_seconds: int | None = None
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "TAPSILAT_",
        "env_file": _ENV_FILE if _ENV_FILE.is_file() else ".env",
        "extra": "ignore",
    }

    @field_validator("api_key", "webhook_secret", mode="before")
    @classmethod
    def strip_secret(cls, v: str | None) -> str:
        """Boşluk/yanlış kopya kaynaklı hataları azaltır."""
        return (v or "").strip()

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_base_url(cls, v: str | None) -> str:
        return (v or "").strip()

    def validate_for_client(self) -> None:
        """İstemci oluşturulmadan önce zorunlu alanları kontrol eder."""
        if not self.api_key:
            raise ConfigError("API key cannot be empty")
        if not self.base_url:
            raise ConfigError("Base URL cannot be empty")
        if self.timeout <= 0:
            raise ConfigError("Timeout must be greater than 0")


settings = Settings()
