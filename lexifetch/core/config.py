"""Configuration model and loading."""

import argparse
import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from lexifetch.utils.constants import Constants


class Config(BaseModel):
    """Runtime configuration for a lexifetch run."""

    input: str | None = None
    output: str | None = None
    jobs: int = Field(default=Constants.DEFAULT_MAX_IN_FLIGHT, ge=1)
    base_url: str = Constants.DEFAULT_BASE_URL
    timeout: float = Field(default=Constants.DEFAULT_TIMEOUT, gt=0)
    retries: int = Field(default=Constants.DEFAULT_RETRIES, ge=0)
    reports: str | None = None
    verbose: bool = False
    debug: bool = False
    debug_words: set[str] = Field(default_factory=set)

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_set(cls, value: Any) -> Any:
        """Accept a comma-separated string as well as a list of words."""
        if value is None:
            return set()
        if isinstance(value, str):
            value = value.split(",")
        return {word.strip().lower() for word in value if word and word.strip()}

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        if self.debug_words and not self.debug:
            raise ValueError("--debug-words requires the --debug flag")
        return self


def _load_json_config(config_path: str) -> dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a JSON object at top level")
    return data


def load_config(
    config_path: str | None,
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Build a Config from an optional JSON file, with CLI arguments taking precedence.

    Args:
        config_path: Path to a JSON configuration file, or None
        args: Parsed command-line arguments
        parser: Parser used to report invalid configuration

    Returns:
        Validated Config
    """
    values: dict[str, Any] = {}

    if config_path:
        try:
            values.update(_load_json_config(config_path))
        except (OSError, ValueError) as e:
            parser.error(f"Could not load config file: {e}")

    # Only explicitly supplied CLI values override the JSON file
    for key, value in vars(args).items():
        if key == "config" or value is None:
            continue
        if isinstance(value, bool) and not value and key in values:
            continue
        values[key] = value

    try:
        return Config(**values)
    except ValidationError as e:
        parser.error(f"Invalid configuration:\n{e}")
        raise  # parser.error exits; keeps type checkers satisfied
