from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Dataset
    DATA_FILE: str = "data/teachers.json"

    # Front-end entry point and assets
    STATIC_DIR: str = "public"

    # Environment
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_DIR: str = "logs"

    # HTTP
    CORS_ALLOW_ORIGIN: str = "*"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
