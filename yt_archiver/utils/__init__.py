"""Shared utilities (safe JSON navigation)."""

from yt_archiver.utils.json_path import dig, dig_list, dig_str

__all__ = ["dig", "dig_list", "dig_str"]
