"""File readers feeding identifiers to the port assigner."""

from .sources import (
    analyze_import_map,
    get_port_from_package_json,
    load_import_map,
    read_package_name,
)

__all__ = [
    "analyze_import_map",
    "get_port_from_package_json",
    "load_import_map",
    "read_package_name",
]
