"""
estemplate Configuration

Settings only affect how rendered templates are dumped to JSON. We read them from 2 sources,
in order of precedence (higher is more priority)
- Environment variables (prefixed with ESTEMPLATE_)
- A .env file, either in the current working directory or in a location specified
  by the ESTEMPLATE_ENV_FILE environment variable
"""

import functools
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "estemplate_"


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    sort_keys: Annotated[
        bool,
        Field(
            description="Sort object keys in JSON output, so that rendered templates are reproducible",
        ),
    ] = True

    indent: Annotated[
        int | None,
        Field(
            description="Indentation of JSON output. Default: compact output without whitespace",
        ),
    ] = None

    ensure_ascii: Annotated[
        bool,
        Field(
            description="Escape non-ascii characters (e.g. in mapping rules) in JSON output",
        ),
    ] = False

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
