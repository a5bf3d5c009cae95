# SPDX-License-Identifier: MIT
"""Unit tests for configuration management."""

import os

import pytest

from sora_video_mcp.config import (
    default_model,
    default_seconds,
    default_size,
    get_client,
    get_path,
    resolve_user_path,
)
from sora_video_mcp.exceptions import ConfigurationError, InputValidationError


@pytest.mark.unit
class TestGetClient:
    def test_missing_key_raises(self, mocker):
        mocker.patch.dict(os.environ, {}, clear=True)

        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY not configured"):
            get_client()

    def test_configuration_error_is_runtime_error(self, mocker):
        mocker.patch.dict(os.environ, {"OPENAI_API_KEY": ""})

        with pytest.raises(RuntimeError):
            get_client()

    def test_client_created(self, mocker):
        mocker.patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"})

        client = get_client()

        assert client.api_key == "sk-test"


@pytest.mark.unit
class TestDefaults:
    def test_builtin_defaults(self, mocker):
        mocker.patch.dict(os.environ, {}, clear=True)

        assert default_model() == "sora-2"
        assert default_size() == "1920x1080"
        assert default_seconds() == 5

    def test_env_overrides(self, mocker):
        mocker.patch.dict(
            os.environ,
            {"SORA_DEFAULT_MODEL": "sora-2-pro", "SORA_DEFAULT_SIZE": "720x1280", "SORA_DEFAULT_SECONDS": "12"},
        )

        assert default_model() == "sora-2-pro"
        assert default_size() == "720x1280"
        assert default_seconds() == 12

    def test_blank_values_fall_back(self, mocker):
        mocker.patch.dict(os.environ, {"SORA_DEFAULT_MODEL": "  ", "SORA_DEFAULT_SECONDS": ""})

        assert default_model() == "sora-2"
        assert default_seconds() == 5

    def test_non_integer_seconds(self, mocker):
        mocker.patch.dict(os.environ, {"SORA_DEFAULT_SECONDS": "five"})

        with pytest.raises(ConfigurationError, match="must be an integer"):
            default_seconds()


@pytest.mark.unit
class TestGetPath:
    def test_unset_returns_none(self, mocker):
        mocker.patch.dict(os.environ, {}, clear=True)

        assert get_path("video") is None
        assert get_path("reference") is None

    def test_video_path_valid(self, mocker, tmp_video_path):
        mocker.patch.dict(os.environ, {"VIDEO_PATH": str(tmp_video_path)})

        assert get_path("video") == tmp_video_path.resolve()

    def test_reference_path_strips_whitespace(self, mocker, tmp_reference_path):
        mocker.patch.dict(os.environ, {"IMAGE_PATH": f"  {tmp_reference_path}\t\n"})

        assert get_path("reference") == tmp_reference_path.resolve()

    def test_caching_prevents_revalidation(self, mocker, tmp_video_path):
        mocker.patch.dict(os.environ, {"VIDEO_PATH": str(tmp_video_path)})

        result1 = get_path("video")
        tmp_video_path.rmdir()
        result2 = get_path("video")

        assert result1 == result2

    def test_nonexistent_directory(self, mocker, tmp_path):
        mocker.patch.dict(os.environ, {"VIDEO_PATH": str(tmp_path / "does_not_exist")})

        with pytest.raises(ConfigurationError, match="does not exist"):
            get_path("video")

    def test_file_not_directory(self, mocker, tmp_path):
        file_path = tmp_path / "not_a_directory.txt"
        file_path.write_text("content")
        mocker.patch.dict(os.environ, {"VIDEO_PATH": str(file_path)})

        with pytest.raises(ConfigurationError, match="is not a directory"):
            get_path("video")

    def test_symlink_path_rejected(self, mocker, tmp_path):
        real_dir = tmp_path / "real_directory"
        real_dir.mkdir()
        link = tmp_path / "symlink_dir"
        link.symlink_to(real_dir)
        mocker.patch.dict(os.environ, {"IMAGE_PATH": str(link)})

        with pytest.raises(ConfigurationError, match="cannot be a symbolic link"):
            get_path("reference")


@pytest.mark.unit
class TestResolveUserPath:
    def test_absolute_path_unchanged(self, mocker, tmp_path, tmp_video_path):
        mocker.patch.dict(os.environ, {"VIDEO_PATH": str(tmp_video_path)})
        target = tmp_path / "elsewhere" / "out.mp4"

        assert resolve_user_path("video", str(target)) == target.resolve()

    def test_relative_path_anchored_at_base(self, mocker, tmp_video_path):
        mocker.patch.dict(os.environ, {"VIDEO_PATH": str(tmp_video_path)})

        assert resolve_user_path("video", "sub/out.mp4") == (tmp_video_path / "sub" / "out.mp4").resolve()

    def test_relative_path_without_base_uses_cwd(self, mocker, tmp_path, monkeypatch):
        mocker.patch.dict(os.environ, {}, clear=True)
        monkeypatch.chdir(tmp_path)

        assert resolve_user_path("reference", "cat.png") == (tmp_path / "cat.png").resolve()

    def test_nul_byte_raises_input_validation_error(self, mocker):
        mocker.patch.dict(os.environ, {}, clear=True)

        with pytest.raises(InputValidationError, match="Invalid path"):
            resolve_user_path("video", "bad\x00name.mp4")
