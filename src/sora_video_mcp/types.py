# SPDX-License-Identifier: MIT
"""Type definitions shared by the validator and the tools."""

from typing import TypedDict

from pydantic import BaseModel


# ---------- Validation results ----------
class FileMetadata(BaseModel, frozen=True):
    """Extension and size of a file that passed validation."""

    extension: str
    size: int


class ValidationResult(BaseModel, frozen=True):
    """Outcome of a single validation call.

    ``valid=False`` always carries an ``error``. ``warnings`` is ``None``
    rather than an empty list when there is nothing to report.
    """

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None
    metadata: FileMetadata | None = None


class FileSizeCheck(BaseModel, frozen=True):
    """Result of comparing a file's size against a ceiling."""

    valid: bool
    size: int


class ParamsValidation(BaseModel, frozen=True):
    """All rule violations found in a set of video parameters."""

    valid: bool
    errors: list[str]


# ---------- Inputs ----------
class VideoParams(TypedDict, total=False):
    """Caller-supplied video generation parameters. Every key is optional."""

    n_seconds: float
    width: int
    height: int
    aspect_ratio: str


# ---------- Presets ----------
class RecommendedSettings(TypedDict):
    seconds: int
    size: str


class Preset(TypedDict):
    """A named starting point for prompts and settings."""

    prompt_tips: str
    recommended_settings: RecommendedSettings
