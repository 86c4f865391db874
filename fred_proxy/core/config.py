from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    # FRED credential, injected into every upstream call
    fred_api_key: str = ""
    fred_base_url: str = "https://api.stlouisfed.org/fred"
    fred_requests_per_minute: int = 120
    # CORS allowed origin for the frontend
    frontend_url: str = "*"
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

settings = Settings()
