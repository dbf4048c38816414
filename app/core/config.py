from decimal import Decimal
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Starlight Cinema API"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = "changeme"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 8

    ADMIN_SECRET_KEY: str = "change-this-admin-secret"
    LOG_LEVEL: str = "INFO"

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "12345"
    POSTGRES_DB: str = "starlight_db"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: str = ""

    # Seat grid layout
    SEAT_ROWS: List[str] = ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J"]
    SEATS_PER_ROW: int = 12
    VIP_ROWS: List[str] = ["I", "J"]

    # Checkout
    TAX_RATE: Decimal = Decimal("0.16")
    FOLIO_PREFIX: str = "STAR"
    PUBLIC_BASE_URL: str = "https://starlightcine.page.gd"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    def assemble_db_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"


settings = Settings()
settings.DATABASE_URL = settings.assemble_db_url()
