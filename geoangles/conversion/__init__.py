"""Conversion — parse → convert → format pipeline для угловых значений."""

from geoangles.conversion.converter import (
    dd_pair_to_dm,
    dd_pair_to_dms,
    dd_to_dm,
    dd_to_dms,
    dm_pair_to_dd,
    dm_to_dd,
    dms_pair_to_dd,
    dms_to_dd,
)
from geoangles.conversion.formatter import (
    format_dd,
    format_dd_pair,
    format_dm,
    format_dm_pair,
    format_dms,
    format_dms_pair,
)
from geoangles.conversion.options import ConversionOptions
from geoangles.conversion.parser import (
    axis_from_hemisphere,
    parse_hemisphere,
    parse_pair_to_dd,
    parse_to_dd,
)

__all__ = [
    # Options
    "ConversionOptions",
    # Parser
    "parse_to_dd",
    "parse_pair_to_dd",
    "axis_from_hemisphere",
    "parse_hemisphere",
    # Converter
    "dd_to_dm",
    "dd_to_dms",
    "dm_to_dd",
    "dms_to_dd",
    "dd_pair_to_dm",
    "dd_pair_to_dms",
    "dm_pair_to_dd",
    "dms_pair_to_dd",
    # Formatter
    "format_dd",
    "format_dm",
    "format_dms",
    "format_dd_pair",
    "format_dm_pair",
    "format_dms_pair",
]
