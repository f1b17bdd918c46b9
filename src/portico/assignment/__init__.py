"""Port assignment from identifiers."""

from .port_assigner import (
    MAX_BASE_PORT,
    MAX_RANGE,
    MIN_BASE_PORT,
    MIN_RANGE,
    PortAssigner,
    compute_port,
    validate_bounds,
    validate_identifier,
    validate_port_request,
)

__all__ = [
    "MAX_BASE_PORT",
    "MAX_RANGE",
    "MIN_BASE_PORT",
    "MIN_RANGE",
    "PortAssigner",
    "compute_port",
    "validate_bounds",
    "validate_identifier",
    "validate_port_request",
]
