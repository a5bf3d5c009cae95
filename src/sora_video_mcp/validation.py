# SPDX-License-Identifier: MIT
"""Input validation for video generation requests.

Every check returns a structured result instead of raising. Filesystem
errors are folded into ``valid=False`` results; the underlying cause is
only visible in the DEBUG log.

Checks:
- File existence, size, and extension (reference images, videos)
- MIME type lookup
- Video parameter ranges (duration, width, height, aspect ratio)
- Prompt length and content
- Video ID format
- Blend weight normalization
"""

import logging
import math
import os
import re
from collections.abc import Collection, Sequence

import aiofiles.os
import anyio

from .constants import (
    BLEND_WEIGHT_TOLERANCE,
    DEFAULT_MIME_TYPE,
    DIMENSION_STEP,
    IMAGE_FORMAT_ORDER,
    LONG_PROMPT_WARNING_LENGTH,
    MAX_HEIGHT,
    MAX_IMAGE_SIZE,
    MAX_PROMPT_LENGTH,
    MAX_SECONDS,
    MAX_VIDEO_ID_LENGTH,
    MAX_VIDEO_SIZE,
    MAX_WIDTH,
    MIME_TYPES,
    MIN_HEIGHT,
    MIN_PROMPT_LENGTH,
    MIN_SECONDS,
    MIN_VIDEO_ID_LENGTH,
    MIN_WIDTH,
    PROMPT_SPECIAL_CHARS,
    SHORT_PROMPT_WARNING_LENGTH,
    SUPPORTED_IMAGE_FORMATS,
    SUPPORTED_VIDEO_FORMATS,
    VALID_ASPECT_RATIOS,
    VIDEO_FORMAT_ORDER,
    VIDEO_ID_PATTERN,
)
from .types import FileMetadata, FileSizeCheck, ParamsValidation, ValidationResult, VideoParams

logger = logging.getLogger("sora_video_mcp")

_VIDEO_ID_RE = re.compile(VIDEO_ID_PATTERN)

_MIB = 1024 * 1024


def _extension(path: str | os.PathLike[str]) -> str:
    return os.path.splitext(os.fspath(path))[1].lower()


# ---------- Filesystem checks ----------
async def check_file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` is accessible for reading.

    Missing files and permission problems both yield False.
    """
    try:
        return await anyio.to_thread.run_sync(os.access, path, os.R_OK)
    except (OSError, ValueError) as e:
        logger.debug("Access check failed for %s: %s", path, e)
        return False


async def check_file_size(path: str | os.PathLike[str], max_bytes: int) -> FileSizeCheck:
    """Compare the size of ``path`` against ``max_bytes``.

    A failed stat reports ``valid=False, size=0``.
    """
    try:
        st = await aiofiles.os.stat(path)
    except (OSError, ValueError) as e:
        logger.debug("Stat failed for %s: %s", path, e)
        return FileSizeCheck(valid=False, size=0)
    return FileSizeCheck(valid=st.st_size <= max_bytes, size=st.st_size)


async def _validate_media_file(
    path: str | os.PathLike[str],
    kind: str,
    allowed: Collection[str],
    display_order: Sequence[str],
    max_bytes: int,
) -> ValidationResult:
    if not await check_file_exists(path):
        return ValidationResult(valid=False, error=f"File not found: {os.fspath(path)}")

    ext = _extension(path)
    if ext not in allowed:
        return ValidationResult(
            valid=False,
            error=f"Unsupported {kind.lower()} format: {ext}. Supported formats: {', '.join(display_order)}",
        )

    size_check = await check_file_size(path, max_bytes)
    if not size_check.valid:
        return ValidationResult(
            valid=False,
            error=(
                f"{kind} file too large: {size_check.size / _MIB:.2f}MB. "
                f"Maximum size: {max_bytes // _MIB}MB"
            ),
        )

    return ValidationResult(valid=True, metadata=FileMetadata(extension=ext, size=size_check.size))


async def validate_image_file(path: str | os.PathLike[str]) -> ValidationResult:
    """Validate a reference image: existence, then extension, then size (20 MiB)."""
    return await _validate_media_file(path, "Image", SUPPORTED_IMAGE_FORMATS, IMAGE_FORMAT_ORDER, MAX_IMAGE_SIZE)


async def validate_video_file(path: str | os.PathLike[str]) -> ValidationResult:
    """Validate a video file: existence, then extension, then size (500 MiB)."""
    return await _validate_media_file(path, "Video", SUPPORTED_VIDEO_FORMATS, VIDEO_FORMAT_ORDER, MAX_VIDEO_SIZE)


def get_mime_type(path: str | os.PathLike[str]) -> str:
    """Look up the MIME type for ``path`` by its (case-insensitive) extension."""
    return MIME_TYPES.get(_extension(path), DEFAULT_MIME_TYPE)


# ---------- Parameter checks ----------
def validate_video_params(params: VideoParams) -> ParamsValidation:
    """Check every supplied parameter and collect all violations."""
    errors: list[str] = []

    n_seconds = params.get("n_seconds")
    if n_seconds is not None and (n_seconds < MIN_SECONDS or n_seconds > MAX_SECONDS):
        errors.append(f"Video duration must be between {MIN_SECONDS} and {MAX_SECONDS} seconds")

    width = params.get("width")
    if width is not None:
        if width < MIN_WIDTH or width > MAX_WIDTH:
            errors.append(f"Width must be between {MIN_WIDTH} and {MAX_WIDTH} pixels")
        if width % DIMENSION_STEP != 0:
            errors.append(f"Width must be divisible by {DIMENSION_STEP}")

    height = params.get("height")
    if height is not None:
        if height < MIN_HEIGHT or height > MAX_HEIGHT:
            errors.append(f"Height must be between {MIN_HEIGHT} and {MAX_HEIGHT} pixels")
        if height % DIMENSION_STEP != 0:
            errors.append(f"Height must be divisible by {DIMENSION_STEP}")

    aspect_ratio = params.get("aspect_ratio")
    if aspect_ratio and aspect_ratio not in VALID_ASPECT_RATIOS:
        errors.append(f"Invalid aspect ratio. Valid options: {', '.join(VALID_ASPECT_RATIOS)}")

    return ParamsValidation(valid=not errors, errors=errors)


def validate_prompt(prompt: str) -> ValidationResult:
    """Reject prompts outside 3..1000 characters; warn about weak ones."""
    if len(prompt) < MIN_PROMPT_LENGTH:
        return ValidationResult(
            valid=False, error=f"Prompt is too short. Minimum {MIN_PROMPT_LENGTH} characters required."
        )
    if len(prompt) > MAX_PROMPT_LENGTH:
        return ValidationResult(
            valid=False, error=f"Prompt is too long. Maximum {MAX_PROMPT_LENGTH} characters allowed."
        )

    warnings: list[str] = []
    if len(prompt) < SHORT_PROMPT_WARNING_LENGTH:
        warnings.append("Short prompts may produce less specific results. Consider adding more detail.")
    if len(prompt) > LONG_PROMPT_WARNING_LENGTH:
        warnings.append("Very long prompts may be less effective. Consider focusing on key elements.")
    if any(ch in PROMPT_SPECIAL_CHARS for ch in prompt):
        warnings.append("Special characters detected. These may be interpreted literally.")

    return ValidationResult(valid=True, warnings=warnings or None)


def validate_video_id(video_id: str) -> bool:
    """Return True for 3-100 characters of letters, digits, ``_`` or ``-``."""
    return (
        MIN_VIDEO_ID_LENGTH <= len(video_id) <= MAX_VIDEO_ID_LENGTH
        and _VIDEO_ID_RE.fullmatch(video_id) is not None
    )


def validate_blend_weights(weights: Sequence[float], expected_count: int) -> ValidationResult:
    """Check count, then sum (within 0.01 of 1.0), then per-weight range."""
    if len(weights) != expected_count:
        return ValidationResult(
            valid=False,
            error=f"Number of weights ({len(weights)}) must match number of videos ({expected_count})",
        )

    total = math.fsum(weights)
    if abs(total - 1.0) > BLEND_WEIGHT_TOLERANCE:
        return ValidationResult(valid=False, error=f"Weights must sum to 1.0 (current sum: {total})")

    if any(w < 0 or w > 1 for w in weights):
        return ValidationResult(valid=False, error="Each weight must be between 0 and 1")

    return ValidationResult(valid=True)
