from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    hotel_name: str = Field(default="Hotel Luchadores")
    base_price_per_client: float = Field(default=20.0, gt=0)
    breakfast_multiplier: float = Field(default=1.25, ge=1)
    # Validate every client before reserving any name; off keeps the
    # scan-and-insert behavior where earlier names stay reserved on rejection.
    atomic_client_check: bool = Field(default=False)
    audit_log_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")


def load_settings() -> Settings:
    defaults = Settings.model_fields
    return Settings(
        hotel_name=os.getenv("HOTEL_NAME", defaults["hotel_name"].default),
        base_price_per_client=float(
            os.getenv("BASE_PRICE_PER_CLIENT", defaults["base_price_per_client"].default)
        ),
        breakfast_multiplier=float(
            os.getenv("BREAKFAST_MULTIPLIER", defaults["breakfast_multiplier"].default)
        ),
        atomic_client_check=os.getenv("ATOMIC_CLIENT_CHECK", defaults["atomic_client_check"].default),
        audit_log_enabled=os.getenv("AUDIT_LOG_ENABLED", defaults["audit_log_enabled"].default),
        log_level=os.getenv("LOG_LEVEL", defaults["log_level"].default).upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
