"""Configuration management using Pydantic Settings"""

from typing import List, Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Run configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_FINES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "ledger-fines"
    log_level: str = "INFO"

    # Input files
    starting_data_path: str = "resources/StartingData.csv"
    transaction_paths: List[str] = [
        "resources/Jan.csv",
        "resources/Feb.csv",
        "resources/Mar.csv",
    ]

    # Ledger policies
    duplicate_user_policy: Literal["error", "last_write_wins"] = "error"
    unknown_user_policy: Literal["drop", "error"] = "drop"

    # Prometheus textfile output, disabled when unset
    metrics_textfile: Optional[str] = None


settings = Settings()
