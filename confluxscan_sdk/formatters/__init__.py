"""
Display formatting for ConfluxScan payloads
"""

from .dates import (
    NOT_AVAILABLE,
    format_timestamp,
    get_24_hours_ago,
    get_current_timestamp,
    get_time_ago,
)
from .numbers import (
    format_cfx,
    format_gas,
    format_gas_price,
    format_number,
    format_percentage,
    format_token_amount,
)
from .responses import (
    format_list_response,
    format_record,
    render_stat_item,
    render_token,
    render_top_stats,
    resolve_decimals,
    wrap_response,
)
from .units import format_unit, to_base_units

__all__ = [
    "NOT_AVAILABLE",
    "format_cfx",
    "format_gas",
    "format_gas_price",
    "format_list_response",
    "format_number",
    "format_percentage",
    "format_record",
    "format_timestamp",
    "format_token_amount",
    "format_unit",
    "get_24_hours_ago",
    "get_current_timestamp",
    "get_time_ago",
    "render_stat_item",
    "render_token",
    "render_top_stats",
    "resolve_decimals",
    "to_base_units",
    "wrap_response",
]
