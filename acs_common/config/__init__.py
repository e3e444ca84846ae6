"""Configuration helpers shared across action-sheet packages."""

from acs_common.config.env import parse_bool_env, parse_choice_env

__all__ = ["parse_bool_env", "parse_choice_env"]
