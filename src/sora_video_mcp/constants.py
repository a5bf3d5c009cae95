# SPDX-License-Identifier: MIT
"""Fixed validation tables and limits."""

from types import MappingProxyType

SUPPORTED_IMAGE_FORMATS: frozenset[str] = frozenset({".jpg", ".jpeg", ".png", ".webp", ".gif", ".bmp", ".tiff"})
SUPPORTED_VIDEO_FORMATS: frozenset[str] = frozenset({".mp4", ".mov", ".avi", ".webm", ".mkv", ".m4v", ".wmv"})

# Display order for error messages
IMAGE_FORMAT_ORDER: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".webp", ".gif", ".bmp", ".tiff")
VIDEO_FORMAT_ORDER: tuple[str, ...] = (".mp4", ".mov", ".avi", ".webm", ".mkv", ".m4v", ".wmv")

MAX_IMAGE_SIZE = 20 * 1024 * 1024  # 20 MiB
MAX_VIDEO_SIZE = 500 * 1024 * 1024  # 500 MiB

MIME_TYPES: MappingProxyType[str, str] = MappingProxyType(
    {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".webp": "image/webp",
        ".gif": "image/gif",
        ".bmp": "image/bmp",
        ".tiff": "image/tiff",
        ".mp4": "video/mp4",
        ".mov": "video/quicktime",
        ".avi": "video/x-msvideo",
        ".webm": "video/webm",
        ".mkv": "video/x-matroska",
        ".m4v": "video/x-m4v",
        ".wmv": "video/x-ms-wmv",
    }
)
DEFAULT_MIME_TYPE = "application/octet-stream"

MIN_SECONDS = 5
MAX_SECONDS = 20
MIN_WIDTH = 256
MAX_WIDTH = 1920
MIN_HEIGHT = 256
MAX_HEIGHT = 1080
DIMENSION_STEP = 8

VALID_ASPECT_RATIOS: tuple[str, ...] = ("16:9", "1:1", "9:16", "4:3", "3:4")

MIN_PROMPT_LENGTH = 3
MAX_PROMPT_LENGTH = 1000
SHORT_PROMPT_WARNING_LENGTH = 20
LONG_PROMPT_WARNING_LENGTH = 500
PROMPT_SPECIAL_CHARS: frozenset[str] = frozenset("<>{}\\")

VIDEO_ID_PATTERN = r"^[A-Za-z0-9_-]+$"
MIN_VIDEO_ID_LENGTH = 3
MAX_VIDEO_ID_LENGTH = 100

BLEND_WEIGHT_TOLERANCE = 0.01

MAX_LIST_LIMIT = 100
