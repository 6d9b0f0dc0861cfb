from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    DM_MODEL: str = "gpt-4o"
    IMAGE_MODEL: str = "dall-e-3"
    DM_MAX_TOKENS: int = 400
    DM_TEMPERATURE: float = 0.8
    STATIC_DIR: str = "public"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def openai_configured(self) -> bool:
        return bool(self.OPENAI_API_KEY)


settings = Settings()
