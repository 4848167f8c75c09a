from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """
    Application settings and configuration management.
    Loads environment variables from .env file.
    """

    # ============ API Configuration ============
    API_TITLE: str = "Interview Scorecard Sync"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    """Forces DEBUG logging regardless of LOG_LEVEL"""

    # ============ Server Configuration ============
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    LOG_LEVEL: str = "INFO"
    """Root log level passed to logging.basicConfig"""

    # ============ CORS Configuration ============
    ALLOWED_ORIGIN: str = "http://localhost:3000"
    """Single trusted origin for the scorecard frontend and admin dashboard"""

    # ============ Session Configuration ============
    TERMINATION_MESSAGE: str = "Session has been terminated"
    """Text sent to every viewer of a session when it is terminated"""

    class Config:
        env_file = ".env"
        """Load environment variables from .env file"""

        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def effective_log_level(self) -> str:
        """Level name for logging and uvicorn, DEBUG when the debug flag is set"""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()

# Create global settings instance
settings = Settings()
