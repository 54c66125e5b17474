from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # Initial order of the jump-to list
    DEFAULT_ASCENDING: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TICTACTOE_")


settings = Settings()
