from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    twelvedata_base_url: str = "https://api.twelvedata.com"
    twelvedata_api_key: str = ""
    market_data_provider: str = "twelvedata"
    watchlist_path: str = "stockly.db"
    search_debounce_seconds: float = 0.5
    http_timeout: float = 60.0
    log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
