# SPDX-License-Identifier: MIT
"""Tool descriptions for MCP server. Optimized for token efficiency."""

# ==================== VIDEO TOOL DESCRIPTIONS ====================

GENERATE_VIDEO = """Generate a video with Sora from a text prompt. Returns a video ID immediately (async). Poll retrieve_video() until completed, then download_video().

Params: prompt (3-1000 chars), size (WIDTHxHEIGHT, e.g. 1920x1080 for 16:9, 720x1280 for 9:16, 1080x1080 for 1:1; default 1920x1080), seconds (5-20, default 5), model (sora-2 default | sora-2-pro, pro may experience delays)

Example: generate_video("a cat walking on a beach at sunset", size="1920x1080", seconds=10)"""

GENERATE_VIDEO_WITH_REFERENCE = """Generate a video that animates a reference image according to the prompt. Returns a video ID immediately (async).

Params: prompt, reference_image (absolute path, or relative to IMAGE_PATH; jpg|jpeg|png|webp|gif|bmp|tiff up to 20MB), size, seconds, model

Example: generate_video_with_reference("the dog starts running", reference_image="/images/dog.png")"""

REMIX_VIDEO = """Remix an existing video with a new prompt while keeping visual consistency. Returns a NEW video ID (async).

Params: video_id (completed source video), prompt

Example: remix_video("video_123", "make it snow")"""

RETRIEVE_VIDEO = """Retrieve status and details of a video generation job. Call repeatedly until status is completed or failed.

Returns: id, status (queued|in_progress|completed|failed), created, progress (0-100)"""

LIST_VIDEOS = """List recent videos.

Params: limit (1-100, default 10), after (pagination cursor from a previous call)"""

DOWNLOAD_VIDEO = """Download a completed video to local storage. Only works once status is completed.

Params: video_id, output_path (absolute, or relative to VIDEO_PATH; parent directories are created)

Example: download_video("video_123", output_path="/videos/cat.mp4")"""

LIST_PRESETS = """List video generation presets, prompt best practices, recommended sizes, and models. No API call."""
