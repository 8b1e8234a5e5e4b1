from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it
load_dotenv()


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./candidates.db"

    # Server
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Uploads: single flat directory, at most 3 files of 5 MiB per submission
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_FILES: int = 3
    MAX_UPLOAD_SIZE_BYTES: int = 5 * 1024 * 1024

    # Orphan sweep: files younger than this may still belong to an in-flight request
    ORPHAN_GRACE_SECONDS: int = 3600

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )


settings = Settings()
