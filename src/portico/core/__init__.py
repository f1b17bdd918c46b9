"""Entry point for the core library components: errors and shared utilities."""

from .errors import (
    ImplementationInvariantViolated,
    InvalidBasePort,
    InvalidIdentifier,
    InvalidRange,
    MalformedInput,
    PorticoError,
    SourceError,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "ImplementationInvariantViolated",
    "InvalidBasePort",
    "InvalidIdentifier",
    "InvalidRange",
    "MalformedInput",
    "PorticoError",
    "SourceError",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
