# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for Sora MCP server tests."""

import pathlib

import pytest

from sora_video_mcp.config import get_path

# Minimal PNG signature + IHDR chunk; only the bytes matter to the tools
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00" * 17


@pytest.fixture(autouse=True)
def clear_path_cache():
    """Clear get_path() cache before each test to ensure isolation."""
    get_path.cache_clear()
    yield
    get_path.cache_clear()


@pytest.fixture
def api_key(monkeypatch):
    """Provide a fake API key so get_client() succeeds."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


@pytest.fixture
def tmp_reference_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory for reference images."""
    ref_path = tmp_path / "references"
    ref_path.mkdir()
    return ref_path


@pytest.fixture
def tmp_video_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory for video downloads."""
    video_path = tmp_path / "videos"
    video_path.mkdir()
    return video_path


@pytest.fixture
def sample_image(tmp_reference_path: pathlib.Path) -> pathlib.Path:
    """Write a small PNG file into the reference directory."""
    img_path = tmp_reference_path / "test.png"
    img_path.write_bytes(PNG_BYTES)
    return img_path


# ==================== Integration Test Fixtures ====================


def make_video(**overrides):
    """Build an openai Video with sensible defaults."""
    from openai.types import Video

    fields = {
        "id": "vid_test123",
        "object": "video",  # Required by Pydantic
        "status": "completed",
        "progress": 100,
        "model": "sora-2",
        "seconds": "8",
        "size": "1280x720",
        "created_at": 1234567890,
    }
    fields.update(overrides)
    return Video(**fields)


@pytest.fixture
def mock_video_response():
    """Sample completed Video object."""
    return make_video()


@pytest.fixture
def mock_video_queued():
    """Sample Video object in queued state."""
    return make_video(id="vid_queued", status="queued", progress=0)


@pytest.fixture
def mock_video_failed():
    """Sample Video object that failed with an upstream error."""
    return make_video(
        id="vid_failed",
        status="failed",
        progress=0,
        error={"code": "moderation_blocked", "message": "Prompt was blocked"},
    )


@pytest.fixture
def video_factory():
    """Factory for Video objects with per-test overrides."""
    return make_video
