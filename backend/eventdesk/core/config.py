from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Event Registration Desk"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"

    # Database
    DATABASE_URL: str = "sqlite:///./eventdesk.db"
    SEED_DEMO_DATA: bool = False

    # Companies registry sheet
    COMPANIES_SHEET: str = "companies"
    COMPANY_NAME_COLUMN: int = 1
    COMPANY_STATUS_COLUMN: int = 5

    # Event table header names
    EVENT_STATUS_COLUMN: str = "EventStatus"
    EVENT_IMAGE_COLUMN: str = "EventImage"
    EVENT_DESCRIPTION_COLUMN: str = "EventDescription"
    EVENT_DATE_COLUMN: str = "EventDate"

    # Hold a per-event lock across the duplicate check and the append
    SERIALIZE_EVENT_WRITES: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"

    # Registration page
    DEFAULT_THEME: str = "classic"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
