# SPDX-License-Identifier: MIT
"""Configuration management for the Sora MCP server.

This module handles:
- Logging setup
- OpenAI client initialization
- Generation defaults from environment variables
- Optional base directories for relative file paths
"""

import logging
import os
import pathlib
import sys
from functools import lru_cache
from typing import Literal

from openai import AsyncOpenAI

from .exceptions import ConfigurationError, InputValidationError

# ---------- Logging configuration ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,  # Log to stderr to avoid interfering with stdio MCP transport
)
logger = logging.getLogger("sora_video_mcp")


# ---------- OpenAI client (stateless) ----------
def get_client() -> AsyncOpenAI:
    """Get an OpenAI async client instance.

    Returns:
        Configured AsyncOpenAI client

    Raises:
        ConfigurationError: If OPENAI_API_KEY environment variable is not set
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY not configured. Please set OPENAI_API_KEY environment variable.")
    return AsyncOpenAI(api_key=api_key)


# ---------- Generation defaults ----------
def default_model() -> str:
    return os.getenv("SORA_DEFAULT_MODEL", "sora-2").strip() or "sora-2"


def default_size() -> str:
    return os.getenv("SORA_DEFAULT_SIZE", "1920x1080").strip() or "1920x1080"


def default_seconds() -> int:
    """Default clip duration.

    Raises:
        ConfigurationError: If SORA_DEFAULT_SECONDS is not an integer
    """
    raw = os.getenv("SORA_DEFAULT_SECONDS", "5").strip() or "5"
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"SORA_DEFAULT_SECONDS must be an integer, got {raw!r}") from e


# ---------- Path configuration (runtime) ----------
_PATH_ENV_VARS: dict[str, str] = {
    "video": "VIDEO_PATH",
    "reference": "IMAGE_PATH",
}

_ERROR_NAMES: dict[str, str] = {
    "video": "Video download directory",
    "reference": "Reference image directory",
}


@lru_cache(maxsize=2)
def get_path(path_type: Literal["video", "reference"]) -> pathlib.Path | None:
    """Get and validate an optional base directory from environment.

    VIDEO_PATH anchors relative download paths, IMAGE_PATH anchors relative
    reference image paths. Unset means "relative to the working directory".

    Security: Rejects symlinks in environment variable paths.

    Args:
        path_type: "video" for VIDEO_PATH or "reference" for IMAGE_PATH

    Returns:
        Validated absolute path, or None if the variable is unset

    Raises:
        ConfigurationError: If the path doesn't exist, isn't a directory, or is a symlink
    """
    env_var = _PATH_ENV_VARS[path_type]
    error_name = _ERROR_NAMES[path_type]
    path_str = os.getenv(env_var, "").strip()
    if not path_str:
        return None

    original_path = pathlib.Path(path_str)
    if original_path.is_symlink():
        raise ConfigurationError(f"{error_name} cannot be a symbolic link: {path_str}")

    try:
        path = original_path.resolve()
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"Invalid {error_name} path '{path_str}': {e}") from e

    if not path.exists():
        raise ConfigurationError(f"{env_var}: {error_name} does not exist: {path}")
    if not path.is_dir():
        raise ConfigurationError(f"{env_var}: {error_name} is not a directory: {path}")

    return path


def resolve_user_path(path_type: Literal["video", "reference"], user_path: str) -> pathlib.Path:
    """Resolve a caller-supplied path to an absolute one.

    Absolute paths (after ``~`` expansion) are used as given. Relative paths
    are anchored at the configured base directory, or the working directory
    when none is configured.

    Raises:
        InputValidationError: If the path cannot be resolved (e.g. embedded NUL byte)
    """
    try:
        candidate = pathlib.Path(user_path).expanduser()
        if not candidate.is_absolute():
            base = get_path(path_type)
            if base is not None:
                candidate = base / candidate
        return candidate.resolve()
    except ValueError as e:
        raise InputValidationError([f"Invalid path {user_path!r}: {e}"]) from e
