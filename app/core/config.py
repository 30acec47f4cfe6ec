# app/core/config.py

from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Salutation used in every /hello response
    greetingServiceGreeting: str = "Hello"

    APP_NAME: str = "Greeting Service"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        """
        Settings come from the process environment, then from a .env file
        in the working directory.
        """
        env_file = ".env"
        # .env may be shared with other tools
        extra = "ignore"

# App-construction time values (title, log level, CORS)
settings = Settings()

def get_settings() -> Settings:
    # Re-read on every request so the greeting follows the current environment
    return Settings()
