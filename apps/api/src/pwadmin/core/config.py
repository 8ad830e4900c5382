from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_ENV: str = "local"
    APP_NAME: str = "pathwar-admin"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "postgresql+psycopg://postgres:postgres@db:5432/pathwar"
    SQL_ECHO: bool = False

    DEFAULT_PAGE_SIZE: int = 100
    GRAVATAR_URL_TEMPLATE: str = "https://www.gravatar.com/avatar/{digest}"


settings = Settings()
