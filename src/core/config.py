"""
Core configuration for the Drug Query API.
Manages environment variables and AWS service settings.
"""
import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # AWS Configuration
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    drug_records_table_name: str = os.getenv("DRUG_RECORDS_TABLE_NAME", "")
    saved_queries_table_name: str = os.getenv("SAVED_QUERIES_TABLE_NAME", "")

    # API Configuration
    api_title: str = os.getenv("API_TITLE", "Drug Query API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Pagination Configuration
    pagination_default_page_size: int = int(os.getenv("PAGINATION_DEFAULT_PAGE_SIZE", "10"))
    pagination_max_page_size: int = int(os.getenv("PAGINATION_MAX_PAGE_SIZE", "1000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
