"""Application configuration with environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    ENV: str = "dev"

    # App Version (format: major.minor.patch)
    VERSION: str = "0.1.0"

    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./custody_ledger.db"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    # Blob storage ("local" for dev, "s3" for any S3-compatible bucket)
    STORAGE_BACKEND: str = "local"
    LOCAL_STORAGE_PATH: str = "/tmp/custody-ledger-files"
    S3_BUCKET: str = "custody-ledger-biometrics"
    S3_REGION: str = "us-east-1"
    S3_ENDPOINT_URL: str = ""  # S3-compatible store (MinIO)
    S3_URL_STYLE: str = ""  # "path" | "virtual" | "" (boto default)
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    UPLOAD_URL_EXPIRY_SECONDS: int = 900  # 15 minutes

    # Error Tracking (optional, set in production)
    SENTRY_DSN: str = ""

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
