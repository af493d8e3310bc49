#!/usr/bin/env python3
"""Configuration management for the Quai adapter.

This module provides type-safe configuration dataclasses with validation.
Configuration is loaded from environment variables with defaults taken
from the Quai chain descriptor where appropriate.
"""

import logging
import os
from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import urlparse

from .chain import QUAI_CHAIN

# Get logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Configuration for talking to a Quai node.

    Attributes:
        rpc_url: HTTP(S) RPC endpoint of the Quai node
        request_timeout: HTTP request timeout in seconds
        log_level: Logging level name
    """

    rpc_url: str = QUAI_CHAIN.default_rpc_url
    request_timeout: int = 30
    log_level: str = "INFO"

    LOG_LEVELS: ClassVar[set[str]] = {
        'DEBUG',
        'INFO',
        'WARNING',
        'ERROR',
        'CRITICAL'
    }

    def __post_init__(self) -> None:
        """Validate client configuration."""
        # Validate RPC URL
        if not self.rpc_url:
            raise ValueError("Quai RPC URL is required (QUAI_RPC_URL)")

        parsed = urlparse(self.rpc_url)
        if parsed.scheme not in ('http', 'https'):
            raise ValueError(
                f"Invalid RPC URL scheme: {parsed.scheme}. "
                "Expected http or https"
            )

        # Validate request timeout
        if self.request_timeout <= 0:
            raise ValueError(f"Request timeout must be positive, got {self.request_timeout}")
        if self.request_timeout > 120:
            raise ValueError(f"Request timeout too long (max 120s), got {self.request_timeout}")

        # Normalise log level
        level = self.log_level.upper()
        if level not in self.LOG_LEVELS:
            raise ValueError(
                f"Unsupported log level: {self.log_level}. "
                f"Supported levels: {', '.join(sorted(self.LOG_LEVELS))}"
            )
        if level != self.log_level:
            # Use object.__setattr__ since dataclass is frozen
            object.__setattr__(self, 'log_level', level)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables.

        Returns:
            ClientConfig instance with loaded values

        Raises:
            ValueError: If environment variables are invalid
        """
        rpc_url = os.environ.get("QUAI_RPC_URL", QUAI_CHAIN.default_rpc_url)

        raw_timeout = os.environ.get("REQUEST_TIMEOUT", "30")
        try:
            request_timeout = int(raw_timeout)
        except ValueError:
            raise ValueError(
                f"REQUEST_TIMEOUT must be an integer number of seconds, got {raw_timeout!r}"
            ) from None

        log_level = os.environ.get("LOG_LEVEL", "INFO")

        return cls(
            rpc_url=rpc_url,
            request_timeout=request_timeout,
            log_level=log_level
        )

    def log_config(self) -> None:
        """Log the configuration in a readable format for debugging."""
        logger.info("=" * 60)
        logger.info("Quai Adapter Configuration")
        logger.info("=" * 60)
        logger.info(f"  Chain: {QUAI_CHAIN.name} ({QUAI_CHAIN.id})")
        logger.info(f"  RPC URL: {self.rpc_url}")
        logger.info(f"  Request Timeout: {self.request_timeout} seconds")
        logger.info(f"  Log Level: {self.log_level}")
        logger.info("=" * 60)
