# SPDX-License-Identifier: MIT
"""Video generation tools using OpenAI's Sora API.

This module contains all video-related operations:
- Creating video generation jobs (text-only and with a reference image)
- Remixing existing videos
- Checking status and progress
- Listing videos
- Downloading completed videos

Every operation validates its inputs before touching the API and returns
a human-readable text block. Configuration, validation, API, and local
I/O failures are reported as ``Error ...`` text rather than raised.
"""

import json
import pathlib

import aiofiles
import aiofiles.os
from openai import OpenAIError
from openai.types import Video

from ..config import default_model, default_seconds, default_size, get_client, logger, resolve_user_path
from ..constants import MAX_LIST_LIMIT, MAX_VIDEO_SIZE
from ..exceptions import ConfigurationError, InputValidationError, SoraMCPError
from ..types import VideoParams
from ..utils import (
    api_error_details,
    api_error_message,
    format_megabytes,
    format_timestamp,
    format_warnings,
    size_to_params,
)
from ..validation import (
    check_file_size,
    get_mime_type,
    validate_image_file,
    validate_prompt,
    validate_video_id,
    validate_video_params,
)

_HANDLED_ERRORS = (SoraMCPError, OpenAIError, OSError)


def _error_text(action: str, exc: Exception, *, details: bool = False) -> str:
    if isinstance(exc, ConfigurationError):
        return f"Error: {exc}"
    if isinstance(exc, InputValidationError):
        return f"Error {action}:\n" + "\n".join(f"- {e}" for e in exc.errors)
    if isinstance(exc, OpenAIError):
        text = f"Error {action}: {api_error_message(exc)}"
        if details:
            body = api_error_details(exc)
            if body:
                text += f"\n\nDetails:\n{body}"
        return text
    return f"Error {action}: {exc}"


def _reject(errors: list[str]) -> None:
    if errors:
        logger.warning("Rejected request: %s", "; ".join(errors))
        raise InputValidationError(errors)


def _check_generation_inputs(prompt: str, size: str, seconds: int, model: str) -> list[str] | None:
    """Validate prompt, duration, size, and model before dispatch.

    Returns:
        Prompt warnings, or None

    Raises:
        InputValidationError: With every problem found
    """
    errors: list[str] = []

    prompt_check = validate_prompt(prompt)
    if not prompt_check.valid and prompt_check.error:
        errors.append(prompt_check.error)

    params: VideoParams = {"n_seconds": seconds}
    try:
        params.update(size_to_params(size))
    except ValueError as e:
        errors.append(str(e))
    errors.extend(validate_video_params(params).errors)
    if not model.strip():
        errors.append("model must not be empty")

    _reject(errors)
    return prompt_check.warnings


def _check_video_id(video_id: str) -> None:
    if not validate_video_id(video_id):
        _reject([f"Invalid video ID: {video_id!r}. Use 3-100 letters, digits, '_' or '-'"])


async def generate_video(
    prompt: str,
    size: str | None = None,
    seconds: int | None = None,
    model: str | None = None,
) -> str:
    """Start a text-to-video generation job.

    Args:
        prompt: Text description of the video
        size: Output resolution as WIDTHxHEIGHT
        seconds: Duration in seconds
        model: Video generation model

    Returns:
        Text summary with the new video ID, or an error description
    """
    try:
        client = get_client()
        model = default_model() if model is None else model
        size = default_size() if size is None else size
        seconds = default_seconds() if seconds is None else seconds
        warnings = _check_generation_inputs(prompt, size, seconds, model)

        request_body = {"model": model, "prompt": prompt, "size": size, "seconds": str(seconds)}
        logger.info("Creating video with params: %s", json.dumps(request_body))
        video = await client.videos.create(**request_body)  # type: ignore[arg-type]
    except _HANDLED_ERRORS as e:
        return _error_text("generating video", e, details=True)

    logger.info("Started job %s (%s)", video.id, video.status)
    return (
        "Video generation started successfully!\n\n"
        f"Video ID: {video.id}\n"
        f"Status: {video.status}\n\n"
        f'Prompt: "{prompt}"\n'
        f"Model: {model}\n"
        f"Size: {size}\n"
        f"Duration: {seconds} seconds\n\n"
        f"Use 'retrieve_video' with video ID \"{video.id}\" to check progress.\n\n"
        "Note: Video generation typically takes 1-3 minutes." + format_warnings(warnings)
    )


async def generate_video_with_reference(
    prompt: str,
    reference_image: str,
    size: str | None = None,
    seconds: int | None = None,
    model: str | None = None,
) -> str:
    """Start a video generation job that animates a reference image.

    Args:
        prompt: How to animate the image
        reference_image: Path to the image (absolute, or relative to IMAGE_PATH)
        size: Output resolution as WIDTHxHEIGHT
        seconds: Duration in seconds
        model: Video generation model

    Returns:
        Text summary with the new video ID, or an error description
    """
    try:
        client = get_client()
        model = default_model() if model is None else model
        size = default_size() if size is None else size
        seconds = default_seconds() if seconds is None else seconds
        if not reference_image:
            _reject(["reference_image path is required"])
        image_path = resolve_user_path("reference", reference_image)

        errors: list[str] = []
        try:
            warnings = _check_generation_inputs(prompt, size, seconds, model)
        except InputValidationError as e:
            errors.extend(e.errors)
            warnings = None
        image_check = await validate_image_file(image_path)
        if not image_check.valid and image_check.error:
            errors.append(image_check.error)
        _reject(errors)

        async with aiofiles.open(image_path, "rb") as f:
            image_bytes = await f.read()
        mime_type = get_mime_type(image_path)

        logger.info("Creating video with reference image: %s (%s)", image_path, mime_type)
        video = await client.videos.create(
            model=model,  # type: ignore[arg-type]
            prompt=prompt,
            size=size,  # type: ignore[arg-type]
            seconds=str(seconds),  # type: ignore[arg-type]
            input_reference=(image_path.name, image_bytes, mime_type),
        )
    except _HANDLED_ERRORS as e:
        return _error_text("generating video with reference", e)

    logger.info("Started job %s (%s) with reference: %s", video.id, video.status, image_path)
    return (
        "Video generation with reference started!\n\n"
        f"Video ID: {video.id}\n"
        f"Status: {video.status}\n\n"
        f"Reference Image: {image_path}\n"
        f'Prompt: "{prompt}"\n'
        f"Model: {model}\n"
        f"Size: {size}\n"
        f"Duration: {seconds} seconds\n\n"
        f"Use 'retrieve_video' with video ID \"{video.id}\" to check progress." + format_warnings(warnings)
    )


async def remix_video(video_id: str, prompt: str) -> str:
    """Start a remix of an existing video with a new prompt.

    Returns:
        Text summary with the NEW video ID, or an error description
    """
    try:
        client = get_client()
        errors: list[str] = []
        if not validate_video_id(video_id):
            errors.append(f"Invalid video ID: {video_id!r}. Use 3-100 letters, digits, '_' or '-'")
        prompt_check = validate_prompt(prompt)
        if not prompt_check.valid and prompt_check.error:
            errors.append(prompt_check.error)
        _reject(errors)

        logger.info("Remixing video %s with new prompt: %s", video_id, prompt)
        video = await client.videos.remix(video_id, prompt=prompt)
    except _HANDLED_ERRORS as e:
        return _error_text("remixing video", e)

    logger.info("Started remix %s (from %s)", video.id, video_id)
    return (
        "Video remix started!\n\n"
        f"New Video ID: {video.id}\n"
        f"Status: {video.status}\n\n"
        f"Original Video: {video_id}\n"
        f'New Prompt: "{prompt}"\n\n'
        f"Use 'retrieve_video' with video ID \"{video.id}\" to check progress." + format_warnings(prompt_check.warnings)
    )


def _format_status(video: Video) -> str:
    text = f"Video ID: {video.id}\nStatus: {video.status}"

    created = format_timestamp(video.created_at)
    if created:
        text += f"\nCreated: {created}"
    if video.progress is not None:
        text += f"\nProgress: {video.progress}%"

    if video.status == "completed":
        text += "\n\n✓ Video generation completed!"
        text += f"\n\nUse 'download_video' with video ID \"{video.id}\" to save the video locally."
    elif video.status == "failed":
        message = video.error.message if video.error and video.error.message else "Unknown error"
        text += f"\n\n✗ Video generation failed: {message}"
    elif video.status in ("queued", "in_progress"):
        text += "\n\n⏳ Video is still processing. Check again in a few moments."
    return text


async def retrieve_video(video_id: str) -> str:
    """Report the status and progress of a video job."""
    try:
        client = get_client()
        _check_video_id(video_id)
        video = await client.videos.retrieve(video_id)
    except _HANDLED_ERRORS as e:
        return _error_text("retrieving video status", e)

    return _format_status(video)


async def list_videos(limit: int | None = None, after: str | None = None) -> str:
    """List recent videos, newest first.

    Args:
        limit: Number of videos to return (1-100, default 10)
        after: Pagination cursor, the last video ID of a previous page

    Returns:
        Numbered list of videos, or an error description
    """
    if limit is None:
        limit = 10
    try:
        client = get_client()
        errors: list[str] = []
        if limit < 1 or limit > MAX_LIST_LIMIT:
            errors.append(f"limit must be between 1 and {MAX_LIST_LIMIT}")
        if after is not None and not validate_video_id(after):
            errors.append(f"Invalid pagination cursor: {after!r}")
        _reject(errors)

        if after is None:
            page = await client.videos.list(limit=limit)
        else:
            page = await client.videos.list(limit=limit, after=after)
    except _HANDLED_ERRORS as e:
        return _error_text("listing videos", e)

    videos = page.data or []
    if not videos:
        return "No videos found."

    lines = [f"Found {len(videos)} video(s):", ""]
    for index, video in enumerate(videos, start=1):
        lines.append(f"{index}. Video ID: {video.id}")
        lines.append(f"   Status: {video.status}")
        created = format_timestamp(video.created_at)
        if created:
            lines.append(f"   Created: {created}")
        lines.append("")

    if page.has_more:
        lines.append(f'More videos available. Use after="{videos[-1].id}" to see the next page.')
        lines.append("")
    lines.append("Use 'retrieve_video' to get details about a specific video.")
    return "\n".join(lines)


async def _discard_partial(path: pathlib.Path) -> None:
    try:
        await aiofiles.os.remove(path)
    except FileNotFoundError:
        return
    logger.warning("Removed partial download %s", path)


async def download_video(video_id: str, output_path: str) -> str:
    """Save a completed video's content to disk.

    Args:
        video_id: ID of a completed video
        output_path: Destination file (absolute, or relative to VIDEO_PATH)

    Returns:
        Saved path and file size, or an error description
    """
    try:
        client = get_client()
        _check_video_id(video_id)
        if not output_path:
            _reject(["output_path is required"])
        full_path = resolve_user_path("video", output_path)

        video = await client.videos.retrieve(video_id)
        if video.status != "completed":
            return (
                f"Cannot download video. Current status: {video.status}\n\n"
                "Please wait for the video to complete generation."
            )

        await aiofiles.os.makedirs(full_path.parent, exist_ok=True)
        try:
            async with client.with_streaming_response.videos.download_content(video_id) as response:
                async with aiofiles.open(full_path, "wb") as f:
                    async for chunk in response.iter_bytes():
                        await f.write(chunk)
        except _HANDLED_ERRORS:
            await _discard_partial(full_path)
            raise
    except _HANDLED_ERRORS as e:
        return _error_text("downloading video", e)

    size_check = await check_file_size(full_path, MAX_VIDEO_SIZE)
    logger.info("Wrote %s (%d bytes)", full_path, size_check.size)
    return f"Video downloaded successfully!\n\nSaved to: {full_path}\nFile size: {format_megabytes(size_check.size)}"
