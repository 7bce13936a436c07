"""Runtime configuration model for Statfeed.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from core.constants import (
    DEFAULT_ANALYTICS_END_DATE,
    DEFAULT_ANALYTICS_START_DATE,
    DEFAULT_IMMIGRATION_BASE_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MOBILITY_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_SUMMARY_URL,
)
from core.errors import StatfeedConfigError

SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True)
class StatfeedConfig:
    """Validated runtime configuration.

    Attributes:
        immigration_base_url: Prefix joined with a port id and ``.json``.
        mobility_url: Line-delimited mobility rows endpoint.
        summary_url: Optional summary document endpoint.
        analytics_url: Analytics rows endpoint, empty when not configured.
        analytics_start_date: ``startDate`` query parameter for analytics.
        analytics_end_date: ``endDate`` query parameter for analytics.
        request_timeout_seconds: Per-request HTTP timeout.
        log_level: Minimum structured log level.
    """

    immigration_base_url: str
    mobility_url: str
    summary_url: str
    analytics_url: str
    analytics_start_date: str
    analytics_end_date: str
    request_timeout_seconds: float
    log_level: str

    @classmethod
    def from_env(cls) -> "StatfeedConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StatfeedConfigError: If environment values are invalid.
        """
        timeout_value = os.getenv(
            "STATFEED_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS)
        )
        log_level_value = os.getenv("STATFEED_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            immigration_base_url=os.getenv(
                "STATFEED_IMMIGRATION_BASE_URL", DEFAULT_IMMIGRATION_BASE_URL
            ),
            mobility_url=os.getenv("STATFEED_MOBILITY_URL", DEFAULT_MOBILITY_URL),
            summary_url=os.getenv("STATFEED_SUMMARY_URL", DEFAULT_SUMMARY_URL),
            analytics_url=os.getenv("STATFEED_ANALYTICS_URL", ""),
            analytics_start_date=os.getenv(
                "STATFEED_ANALYTICS_START_DATE", DEFAULT_ANALYTICS_START_DATE
            ),
            analytics_end_date=os.getenv(
                "STATFEED_ANALYTICS_END_DATE", DEFAULT_ANALYTICS_END_DATE
            ),
            request_timeout_seconds=_parse_timeout(timeout_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        StatfeedConfigError: If value is not a positive finite number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise StatfeedConfigError(
            "Invalid STATFEED_REQUEST_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set STATFEED_REQUEST_TIMEOUT to a positive number."
        ) from error
    if not math.isfinite(timeout) or timeout <= 0:
        raise StatfeedConfigError(
            f"Invalid STATFEED_REQUEST_TIMEOUT value: expected > 0, got '{raw_value}'. "
            "Set STATFEED_REQUEST_TIMEOUT to a positive number."
        )
    return timeout


def _parse_log_level(raw_value: str) -> str:
    """Validate the log level environment value."""
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise StatfeedConfigError(
            f"Invalid STATFEED_LOG_LEVEL value '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level
