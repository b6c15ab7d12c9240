from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "brewhouse"
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    database_url: str
    db_connect_retries: int = 30
    db_connect_retry_delay: float = 1.0
    run_migrations_on_startup: bool = True

    session_secret: str = "change-me"
    session_max_age_seconds: int = 14 * 24 * 60 * 60

    # one tick of the brewing sequencer equals one logical minute
    tick_interval_seconds: float = 60.0
    brew_stages_file: str | None = None

settings = Settings()
