from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    catalog_base_url: str = "https://openlibrary.org"
    cover_base_url: str = "https://covers.openlibrary.org/b/id"
    placeholder_cover_url: str = "https://placehold.co/180x250/cbd5e1/475569?text=No+Cover"

    # Seconds. Open Library search can be slow for broad general queries.
    request_timeout: float = 10.0
    user_agent: str = "Book Hub/0.1.0"

    log_level: str = "INFO"


settings = Settings()
