from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    database_echo: bool = False
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 7

    auth_cookie_name: str = "auth-token"
    environment: str = "development"
    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"
    log_format: str = "text"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
