from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    indent: str = "  "  # one level of output indentation
    line_break: str = "<br>"  # empty blocks and embedded newlines
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BLOCKMARKUP_",
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings read from the environment once per process.

    Pass an explicit `Settings` to `MarkupGenerator` to bypass the cache, e.g. in tests.
    """
    return Settings()
