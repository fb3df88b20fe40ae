"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "rooms-payments"
    log_level: str = "INFO"

    # Display policy
    currency_symbol: str = "₹"
    max_payment_amount: int = 100_000_000  # 10 crore
    max_text_length: int = 500
    max_raw_text_length: int = 2_000  # input cut before markup removal
    gateway_id_max_length: int = 20
    future_date_tolerance_seconds: int = 86_400  # 1 day
    display_timezone: str = "UTC"

    # Receipt service
    receipt_api_base: str = "http://localhost:8001"
    receipt_path: str = "/api/receipt"
    receipt_filename_template: str = "Rooms4U_Receipt_{payment_id}.pdf"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
