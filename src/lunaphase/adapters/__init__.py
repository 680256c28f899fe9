# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for coefficient-table storage.

File I/O and JSON parsing are confined to this layer.
"""
from lunaphase.adapters.json_tables import (
    BundledTableSource,
    parse_periodic_table,
    parse_vsop87_series,
)

__all__ = [
    "BundledTableSource",
    "parse_periodic_table",
    "parse_vsop87_series",
]
