"""Configuration system using pydantic-settings with environment variable loading."""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class PairDecodeMode(str, Enum):
    """How a delimited pair string without "_" is handled on decode."""

    LENIENT = "lenient"  # default-constructed (empty) pair, no error
    STRICT = "strict"  # raise MalformedPair


class StatusDecodeMode(str, Enum):
    """How an unknown transaction status label is handled on decode."""

    STRICT = "strict"  # raise UnknownStatus
    FALLBACK = "fallback"  # map to TransactionStatus.EXPIRED


class CodecSettings(BaseSettings):
    """Document codec behaviour.

    The defaults reproduce the behaviour existing documents were written
    against: silent empty pairs, strict status labels.
    All fields configurable via CODEC_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="CODEC_")

    pair_mode: PairDecodeMode = PairDecodeMode.LENIENT
    status_mode: StatusDecodeMode = StatusDecodeMode.STRICT


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    codec: CodecSettings = CodecSettings()
