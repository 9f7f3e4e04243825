from pydantic_settings import BaseSettings, SettingsConfigDict
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOMETASKS_", env_file=".env", extra="ignore")
    DATABASE_URL: str = "sqlite:///./hometasks.db"

    SECRET_KEY: str = "change-me"
    TOKEN_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_DAYS: int = 14
    LOG_LEVEL: str = "INFO"
settings = Settings()
