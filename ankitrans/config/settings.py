"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DictionarySettings(BaseSettings):
    """Bing Dictionary lookup configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="https://cn.bing.com/dict/search",
        validation_alias=AliasChoices("BING_DICT_URL"),
    )
    market: str = Field(
        default="zh-CN", validation_alias=AliasChoices("BING_DICT_MARKET")
    )
    request_timeout: int = Field(
        default=10, validation_alias=AliasChoices("BING_DICT_TIMEOUT")
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        validation_alias=AliasChoices("BING_DICT_USER_AGENT"),
    )
    accept_language: str = Field(
        default="zh-CN,zh;q=0.9",
        validation_alias=AliasChoices("BING_DICT_ACCEPT_LANGUAGE"),
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Dictionary URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_positive_integers(cls, v: int) -> int:
        """Validate positive integer values"""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v


class AnkiSettings(BaseSettings):
    """Note type naming used by the card template"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    deck_name: str = Field(
        default="AnkiTrans", validation_alias=AliasChoices("ANKI_DECK_NAME")
    )
    model_name: str = Field(
        default="AnkiTrans", validation_alias=AliasChoices("ANKI_MODEL_NAME")
    )

    @field_validator("deck_name", "model_name")
    @classmethod
    def validate_names(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(
        default="WARNING", validation_alias=AliasChoices("LOG_LEVEL")
    )
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    dictionary: DictionarySettings = Field(default_factory=DictionarySettings)
    anki: AnkiSettings = Field(default_factory=AnkiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Global settings
    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))
    verbose: bool = Field(default=False, validation_alias=AliasChoices("VERBOSE"))


# Global settings instance
settings = AppSettings()
