"""Configuration loading.

Reads the config file, fetches every listed document and hands the
results to the collection. Any failure here is fatal: the server does
not start with a partial set of documents.
"""

import logging
from pathlib import Path

import httpx
import yaml
from pydantic import BaseModel, ValidationError, field_validator

from swagger_mcp.collection import SwaggerSource
from swagger_mcp.parser.detect import decode_document, detect_format

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ConfigError(Exception):
    """Raised when the configuration or one of its documents can't be loaded."""


class ConfigEntry(BaseModel):
    name: str
    url: str

    @field_validator("url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("url must be an http(s) URL")
        return value


class Config(BaseModel):
    endpoints: list[ConfigEntry]


def read_config(config_path: Path) -> Config:
    """Parse and validate the config file (JSON or YAML)."""
    try:
        text = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
        return Config.model_validate(data)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Error loading config from {config_path}: {e}") from e


def fetch_document(client: httpx.Client, entry: ConfigEntry) -> SwaggerSource:
    """Download and decode the document for one config entry."""
    logger.info("Fetching %s from %s", entry.name, entry.url)
    try:
        response = client.get(entry.url)
        response.raise_for_status()
        schema = decode_document(response.text)
    except (httpx.HTTPError, ValueError) as e:
        raise ConfigError(f"Error fetching {entry.name} from {entry.url}: {e}") from e

    if detect_format(schema) == "unknown":
        logger.warning("%s does not look like an OpenAPI or Swagger document", entry.url)
    return SwaggerSource(name=entry.name, url=entry.url, schema=schema)


def load_config(
    config_path: Path,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[SwaggerSource]:
    """Read ``config_path`` and fetch every document it lists, in order."""
    config = read_config(config_path)
    logger.info("Loading %d documents from %s", len(config.endpoints), config_path)

    if client is not None:
        return [fetch_document(client, entry) for entry in config.endpoints]

    with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
        return [fetch_document(own_client, entry) for entry in config.endpoints]
