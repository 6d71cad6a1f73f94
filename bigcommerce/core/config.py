from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Raise while decoding records when a timestamp is not RFC 2822 text.
    # When False the current time is kept and a warning is logged.
    strict_dates: bool = True

    model_config = SettingsConfigDict(
        env_prefix="BIGCOMMERCE_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
