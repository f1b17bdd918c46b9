"""Shared utility helpers used across the library."""

from .config import (
    DEFAULT_BASE_PORT,
    DEFAULT_HASH,
    DEFAULT_RANGE,
    DEFAULT_REDUCER,
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
    with_metadata,
)
from .logging import (
    IdentifierFilter,
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_int_in_range,
    ParamValidationError,
)
from .performance import (
    Timer,
)

__all__ = [
    "DEFAULT_BASE_PORT",
    "DEFAULT_HASH",
    "DEFAULT_RANGE",
    "DEFAULT_REDUCER",
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "with_metadata",
    "IdentifierFilter",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_int_in_range",
    "ParamValidationError",
    "Timer",
]
