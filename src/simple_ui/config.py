"""
Configuration for the simple script executor.

Loads and validates environment variables using Pydantic.
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SIMPLE_PATH = "/opt/bin/simple"


class SimpleConfig(BaseModel):
    """Configuration for running scripts through the simple renderer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Renderer process
    simple_path: str = Field(
        default=DEFAULT_SIMPLE_PATH,
        description="Path to the simple renderer executable",
    )
    response_timeout_sec: Optional[float] = Field(
        default=None,
        description="Seconds to wait for the renderer to answer (None waits forever)",
        gt=0,
    )
    accumulate_output: bool = Field(
        default=False,
        description="Keep all output chunks instead of only the last one",
    )
    read_chunk_size: int = Field(
        default=65536,
        description="Bytes requested per read from the renderer stdout",
        ge=1,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format",
    )

    @field_validator("simple_path")
    @classmethod
    def validate_simple_path(cls, v: str) -> str:
        """Reject an empty executable path."""
        if not v.strip():
            raise ValueError("simple_path must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {valid_levels}"
            )
        return v_upper

    @classmethod
    def from_env(cls) -> "SimpleConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - SIMPLE_PATH (default: /opt/bin/simple)
        - SIMPLE_RESPONSE_TIMEOUT_SEC (optional)
        - SIMPLE_ACCUMULATE_OUTPUT (default: 0, set to 1 to enable)
        - SIMPLE_READ_CHUNK_SIZE (default: 65536)
        - LOG_LEVEL (default: INFO)
        - LOG_FORMAT (default: text)

        Returns:
            SimpleConfig: Validated configuration instance

        Raises:
            ValueError: If a numeric variable cannot be parsed or validation fails
        """
        timeout = os.getenv("SIMPLE_RESPONSE_TIMEOUT_SEC")

        return cls(
            simple_path=os.getenv("SIMPLE_PATH", DEFAULT_SIMPLE_PATH),
            response_timeout_sec=float(timeout) if timeout else None,
            accumulate_output=os.getenv("SIMPLE_ACCUMULATE_OUTPUT", "0") == "1",
            read_chunk_size=int(os.getenv("SIMPLE_READ_CHUNK_SIZE", "65536")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "text").lower(),
        )
