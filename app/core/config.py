from typing import Annotated
from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_PROJECT_NAME = "Memories API"
DEFAULT_DATABASE_URL = "sqlite:///./memories.db"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    API_PREFIX: str = ''
    ENV: str = 'development'
    DEBUG: bool = False

    DATABASE_URL: str = DEFAULT_DATABASE_URL
    LOG_LEVEL: str = 'INFO'
    LOG_JSON: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ['*']

    SECRET_KEY: str = 'spacetime'
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30
    TOKEN_COOKIE_NAME: str = 'token'
    AUTO_CREATE_TABLES: bool = False

    MEMORY_EXCERPT_LENGTH: int = 115

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, value):  # type: ignore[override]
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return []
            if value == '*':
                return ['*']
            return [item.strip() for item in value.split(',') if item.strip()]
        return value

    @field_validator('API_PREFIX')
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        value = value.strip().rstrip('/')
        if value and not value.startswith('/'):
            value = f'/{value}'
        return value


settings = Settings()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
