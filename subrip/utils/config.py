""".env loading with CLI override merging."""

from __future__ import annotations

import os
from typing import Any

from dotenv import find_dotenv, load_dotenv

DEFAULTS: dict[str, Any] = {
    "encoding": "utf-8",
    "allow_unterminated": False,
    "verbose": False,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def build_config(
    cli_args: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge defaults <- env vars <- CLI args."""
    load_dotenv(find_dotenv(usecwd=True))
    config = dict(DEFAULTS)

    # Layer 2: env vars (SUBRIP_ prefix)
    env_map = {
        "SUBRIP_ENCODING": "encoding",
        "SUBRIP_ALLOW_UNTERMINATED": "allow_unterminated",
        "SUBRIP_VERBOSE": "verbose",
    }
    for env_key, cfg_key in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            if isinstance(DEFAULTS[cfg_key], bool):
                config[cfg_key] = _parse_bool(val)
            else:
                config[cfg_key] = val

    # Layer 3: CLI args (override everything)
    if cli_args:
        for key, val in cli_args.items():
            if val is not None:
                config[key] = val

    return config


def parser_options(config: dict[str, Any]) -> dict[str, Any]:
    """Keyword arguments for the parse_* functions."""
    return {
        "encoding": config.get("encoding", DEFAULTS["encoding"]),
        "allow_unterminated": bool(config.get("allow_unterminated", False)),
    }
