from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Numeric form fields that fail to parse:
    #   "strict"  → raise InvalidInputError naming the field
    #   "lenient" → substitute NaN so every threshold check falls through
    NUMERIC_INPUT_POLICY: str = "strict"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
