"""Configuration management for the nanosync command line."""

import json
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import MappingDocument

LOG_LEVEL_ENV = "NANOSYNC_LOG_LEVEL"


def setup_logging(level: str = "INFO") -> None:
    """Set up logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def load_environment(env_file: Optional[str] = None) -> None:
    """Load environment variables from .env file.

    Args:
        env_file: Path to .env file. If None, looks for .env in current directory.
    """
    env_path = Path(env_file) if env_file else Path('.env')

    if env_path.exists():
        load_dotenv(env_path)
        logging.info(f"Loaded environment from {env_path}")
    else:
        logging.debug(f"No .env file found at {env_path}")


def load_mapping(path: str) -> MappingDocument:
    """Load and validate a JSON mapping file.

    Args:
        path: Path to the mapping file

    Returns:
        Parsed mapping document

    Raises:
        ConfigurationError: If the file is not valid JSON or not a valid mapping
    """
    try:
        data = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read mapping file {path}: {e}") from e

    try:
        return MappingDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid mapping file {path}: {e}") from e
