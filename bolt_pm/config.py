import os
import yaml
from pathlib import Path
from typing import Any, Dict
from dotenv import dotenv_values, find_dotenv
import logging

logger = logging.getLogger(__name__)

MANIFEST_FILE = "bolt.toml"
COMPILER_NAME = "bolt-compiler"
DEFAULT_PROJECT_NAME = "new-bolt-project"
DEFAULT_PROJECT_VERSION = "0.1.0"
DEFAULT_ENTRYPOINT = "main.bolt"
DEFAULT_OUTPUT_NAME = "my-app"
DEFAULT_DEPENDENCY_VERSION = "1.0.0"
DEFAULT_LOG_LEVEL = "WARNING"


def get_package_root() -> Path:
    """Get the directory holding the bolt_pm package files.

    Returns:
        Path to the package directory
    """
    return Path(__file__).parent


def get_config() -> Dict[str, Any]:
    """Get configuration by merging config.yaml and environment variables.
    Environment variables from .env take precedence over config.yaml values.

    Returns:
        Dictionary containing merged configuration
    """
    config_path = Path(
        os.getenv("BOLT_CONFIG_PATH", str(get_package_root() / "config.yaml"))
    )
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        logger.debug(f"Loading environment overrides from {dotenv_path}")
        env_vars = dotenv_values(dotenv_path)
        config.update(env_vars)

    return config  # type: ignore[no-any-return]


def _get_setting(config: dict, env_key: str, section: str, key: str, default: str) -> str:
    value = os.getenv(env_key) or config.get(env_key)
    if value:
        return str(value)
    value = (config.get(section) or {}).get(key)
    return str(value) if value else default


def get_manifest_filename(config: dict) -> str:
    """Name of the manifest file, relative to the working directory."""
    return _get_setting(config, "BOLT_MANIFEST", "manifest", "filename", MANIFEST_FILE)


def get_compiler_name(config: dict) -> str:
    """Name (or path) of the external compiler binary."""
    return _get_setting(config, "BOLT_COMPILER", "compiler", "name", COMPILER_NAME)


def get_log_level(config: dict) -> str:
    return _get_setting(
        config, "BOLT_LOG_LEVEL", "logging", "level", DEFAULT_LOG_LEVEL
    ).upper()
