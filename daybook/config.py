"""Configuration for DayBook.

Reads the optional ``~/.config/daybook/config.toml``::

    [storage]
    db_path = "~/.config/daybook/daybook.db"

    [export]
    directory = "~/Downloads"

    [logging]
    level = "WARNING"
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from rich.logging import RichHandler

CONFIG_DIR = Path.home() / ".config" / "daybook"
CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "daybook.db"
DB_ENV_VAR = "DAYBOOK_DB"

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration.

    Args:
        config_path: Path to the TOML file. Defaults to CONFIG_PATH.

    Returns:
        Config dict, empty if the file is missing or unreadable.
    """
    path = config_path or CONFIG_PATH

    if not path.exists():
        return {}

    try:
        return toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}


def get_db_path(config: dict, override: Optional[str] = None) -> Path:
    """Resolve the database path.

    Precedence: explicit override, DAYBOOK_DB, config file, default.
    """
    raw = override or os.environ.get(DB_ENV_VAR) or config.get("storage", {}).get("db_path")
    if not raw:
        return DEFAULT_DB_PATH
    return Path(raw).expanduser()


def get_export_dir(config: dict) -> Path:
    """Resolve the CSV export directory, defaulting to the working directory."""
    raw = config.get("export", {}).get("directory")
    return Path(raw).expanduser() if raw else Path.cwd()


def setup_logging(config: dict, verbose: bool = False) -> None:
    """Route log records through rich.

    Args:
        config: Loaded configuration.
        verbose: Force DEBUG level.
    """
    if verbose:
        level = logging.DEBUG
    else:
        name = str(config.get("logging", {}).get("level", "WARNING")).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
