"""Configurações da aplicação"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import cached_property


class Settings(BaseSettings):
    """Configurações da aplicação"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    # App
    APP_NAME: str = "Estatísticas API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development ou production

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: str = (
        "http://localhost:3000,http://localhost:5173,"
        "http://127.0.0.1:3000,http://127.0.0.1:5173"
    )

    @cached_property
    def is_production(self) -> bool:
        """Verifica se está em modo produção"""
        return self.ENVIRONMENT.lower() == "production"

    @cached_property
    def cors_origins_list(self) -> list[str]:
        """Retorna lista de origens CORS"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Database
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "estatisticas"

    @cached_property
    def database_url(self) -> str:
        """Retorna URL completa do banco de dados"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # Redis (result backend do Celery e storage do rate limiter)
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None

    # RabbitMQ
    RABBITMQ_HOST: str = "localhost"
    RABBITMQ_PORT: int = 5672
    RABBITMQ_USER: str = "admin"
    RABBITMQ_PASSWORD: str = "admin"
    RABBITMQ_VHOST: str = "/"

    # Celery
    CELERY_BROKER_URL: Optional[str] = None
    CELERY_RESULT_BACKEND: Optional[str] = None

    @cached_property
    def celery_broker_url(self) -> str:
        """URL do broker Celery (RabbitMQ)"""
        if self.CELERY_BROKER_URL:
            return self.CELERY_BROKER_URL
        vhost = self.RABBITMQ_VHOST.strip()
        if not vhost or vhost == '/':
            vhost = '/'
        elif not vhost.startswith('/'):
            vhost = '/' + vhost
        return f"amqp://{self.RABBITMQ_USER}:{self.RABBITMQ_PASSWORD}@{self.RABBITMQ_HOST}:{self.RABBITMQ_PORT}{vhost}"

    @cached_property
    def celery_result_backend(self) -> str:
        """URL do backend de resultados Celery (Redis)"""
        if self.CELERY_RESULT_BACKEND:
            return self.CELERY_RESULT_BACKEND
        password = f":{self.REDIS_PASSWORD}@" if self.REDIS_PASSWORD else ""
        return f"redis://{password}{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    RATE_LIMIT_DEFAULT: str = "1000/hour"
    RATE_LIMIT_READS: str = "100/minute"

    # Security
    API_KEY_HEADER: str = "X-API-Key"
    ADMIN_API_KEY: Optional[str] = None

    # Estatísticas
    TOP_SCORERS_DEFAULT_LIMIT: int = 10
    MAX_RESULT_LIMIT: int = 100
    DASHBOARD_TOP_TEAMS: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"


settings = Settings()
