from pydantic import Field
from pydantic_settings import BaseSettings

from app.client.environments import Environment, get_base_url


class Settings(BaseSettings):
    model_config = {"env_prefix": "BI_", "env_file": ".env", "env_file_encoding": "utf-8"}

    environment: Environment = Field(default=Environment.TEST)
    base_url_override: str = Field(default="")
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    cors_origins: str = Field(default="http://localhost:3000")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, gt=0, lt=65536)

    @property
    def platform_base_url(self) -> str:
        return self.base_url_override.rstrip("/") or get_base_url(self.environment)


settings = Settings()
