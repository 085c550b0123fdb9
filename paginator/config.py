"""
Pagination configuration.
Defaults come from the environment (.env supported), named groups live in memory.
"""

import os
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from paginator.exceptions import UnknownConfigGroupError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"⚠️ Ignoring non-integer {name}={raw!r}, using {default}")
        return default


def setup_logging(debug: Optional[bool] = None, log_level: Optional[str] = None) -> int:
    """Configure root logging from DEBUG / LOG_LEVEL and return the level used"""
    if debug is None:
        debug = _env_bool("DEBUG", False)
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, (log_level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)

    if debug:
        logger.debug("🐛 DEBUG mode enabled - verbose logging activated")
    else:
        logger.info(f"📊 Log level set to: {logging.getLevelName(level)}")
    return level


class PaginationConfig(BaseModel):
    """Pagination defaults"""
    items_per_page: int = Field(default_factory=lambda: _env_int("PAGINATION_ITEMS_PER_PAGE", 10))
    auto_hide: bool = Field(default_factory=lambda: _env_bool("PAGINATION_AUTO_HIDE", True))
    first_page_in_url: bool = Field(default_factory=lambda: _env_bool("PAGINATION_FIRST_PAGE_IN_URL", False))
    query_key: str = Field(default_factory=lambda: os.getenv("PAGINATION_QUERY_KEY", "page"))

    def merged(self, overrides: Dict[str, Any]) -> "PaginationConfig":
        """Copy of this config with known keys from overrides applied"""
        known = {k: v for k, v in overrides.items() if k in type(self).model_fields}
        return self.model_validate({**self.model_dump(), **known})


def get_config() -> PaginationConfig:
    """Fresh defaults read from the current environment"""
    return PaginationConfig()


# =============================================================================
# CONFIG GROUPS
# =============================================================================

_groups: Dict[str, Dict[str, Any]] = {}


def register_config_group(name: str, settings: Dict[str, Any]) -> None:
    """Register (or replace) a named group. A 'group' key names the parent."""
    _groups[name] = dict(settings)
    logger.debug(f"🗂️ Registered pagination config group '{name}'")


def clear_config_groups() -> None:
    _groups.clear()


def config_group(name: str = "default") -> Dict[str, Any]:
    """
    Resolve a group and its parents into one settings dict.

    Child values win over parent values. The 'default' group is optional;
    asking for it when it isn't registered returns an empty dict.
    """
    if name not in _groups:
        if name == "default":
            return {}
        logger.warning(f"⚠️ Unknown pagination config group '{name}'")
        raise UnknownConfigGroupError(name)

    resolved: Dict[str, Any] = {}
    seen = set()
    current: Optional[str] = name
    while current is not None and current in _groups and current not in seen:
        seen.add(current)
        values = _groups[current]
        for key, value in values.items():
            if key != "group":
                resolved.setdefault(key, value)
        current = values.get("group")

    return resolved
