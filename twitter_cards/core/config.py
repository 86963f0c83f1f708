from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_reload: bool = False
    
    # CORS settings
    cors_origins: List[str] = ["http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    
    # Largest HTML document accepted by the API, in bytes
    max_html_bytes: int = 5_000_000
    
    # Environment
    environment: str = "development"  # development, staging, production
    
    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in env file
    )
    
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


# Create a single instance of settings
settings = Settings()
