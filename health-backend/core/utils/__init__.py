"""Utility helpers shared across core packages."""

from .env import get_env, get_env_float, get_env_int, get_node_env, is_production
from .json_extraction import extract_json_object, extract_json_value

__all__ = [
    "extract_json_object",
    "extract_json_value",
    "get_env",
    "get_env_float",
    "get_env_int",
    "get_node_env",
    "is_production",
]
