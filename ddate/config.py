"""ddate configuration.

Configuration loading with environment variable support and sensible
defaults.

Environment Variables:
    DDATE_DATE_ORDER: Order used for ambiguous dates such as "01/02/2024";
        one of YMD, MDY, DMY (default: MDY)
    DDATE_LOG_LEVEL: Logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from ddate.errors import ConfigurationError
from ddate.infer import DateOrder, InferOptions

logger = logging.getLogger(__name__)

ENV_DATE_ORDER = "DDATE_DATE_ORDER"
ENV_LOG_LEVEL = "DDATE_LOG_LEVEL"

DEFAULT_DATE_ORDER = DateOrder.MDY
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DdateConfig:
    """Resolved settings for the ddate command.

    Attributes:
        date_order: Order for ambiguous slash and dash dates.
        log_level: Logging level name, upper case.
    """

    date_order: DateOrder = DEFAULT_DATE_ORDER
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def infer_options(self) -> InferOptions:
        """Return parsing options matching this configuration."""
        return InferOptions(date_order=self.date_order)


def _parse_date_order(value: str) -> DateOrder:
    try:
        return DateOrder(value.strip().upper())
    except ValueError:
        choices = ", ".join(order.value for order in DateOrder)
        raise ConfigurationError(
            f"{ENV_DATE_ORDER} must be one of {choices}, got {value!r}"
        ) from None


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
        )
    return level


def load_config(environ: Mapping[str, str] | None = None) -> DdateConfig:
    """Load configuration from environment variables.

    Args:
        environ: Mapping to read settings from. Defaults to os.environ.

    Returns:
        The resolved DdateConfig. Unset or empty variables keep defaults.

    Raises:
        ConfigurationError: If a variable holds an unrecognised value.
    """
    if environ is None:
        environ = os.environ

    date_order = DEFAULT_DATE_ORDER
    raw_order = environ.get(ENV_DATE_ORDER, "")
    if raw_order.strip():
        date_order = _parse_date_order(raw_order)

    log_level = DEFAULT_LOG_LEVEL
    raw_level = environ.get(ENV_LOG_LEVEL, "")
    if raw_level.strip():
        log_level = _parse_log_level(raw_level)

    config = DdateConfig(date_order=date_order, log_level=log_level)
    logger.debug("Loaded configuration: %s", config)
    return config


__all__ = [
    "DdateConfig",
    "load_config",
    "ENV_DATE_ORDER",
    "ENV_LOG_LEVEL",
]
