"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "wedding-planner-engine"
    log_level: str = "INFO"

    # Urgency
    urgency_window_days: int = 7  # Due within this many days counts as "this week"

    # Allocation templates
    allocation_tolerance_per_category: int = 1  # Whole dollars of rounding drift per category

    # Timeline
    timeline_padding_months: int = 1

    # Payment plans
    payment_min_lead_days: int = 7  # Past due dates get pushed to today + this


settings = Settings()
