"""GNOME Terminal to Ghostty mapping data."""

from .table import MappingEffect, MappingTable, classify_entry, load_mapping_table

__all__ = ["MappingEffect", "MappingTable", "classify_entry", "load_mapping_table"]
