# SPDX-License-Identifier: MIT
"""Sora MCP Server - FastMCP server for OpenAI Sora video generation.

This module initializes the FastMCP server and registers all tools.
Business logic lives in submodules under tools/.
"""

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from . import __version__
from .config import logger
from .descriptions import (
    DOWNLOAD_VIDEO,
    GENERATE_VIDEO,
    GENERATE_VIDEO_WITH_REFERENCE,
    LIST_PRESETS,
    LIST_VIDEOS,
    REMIX_VIDEO,
    RETRIEVE_VIDEO,
)
from .tools import presets, video

# Initialize FastMCP server
mcp = FastMCP("sora-mcp-server")


# ==================== VIDEO TOOLS ====================
@mcp.tool(description=GENERATE_VIDEO)
async def generate_video(
    prompt: str,
    size: str | None = None,
    seconds: int | None = None,
    model: str | None = None,
) -> str:
    return await video.generate_video(prompt, size, seconds, model)


@mcp.tool(description=GENERATE_VIDEO_WITH_REFERENCE)
async def generate_video_with_reference(
    prompt: str,
    reference_image: str,
    size: str | None = None,
    seconds: int | None = None,
    model: str | None = None,
) -> str:
    return await video.generate_video_with_reference(prompt, reference_image, size, seconds, model)


@mcp.tool(description=REMIX_VIDEO)
async def remix_video(video_id: str, prompt: str) -> str:
    return await video.remix_video(video_id, prompt)


@mcp.tool(description=RETRIEVE_VIDEO)
async def retrieve_video(video_id: str) -> str:
    return await video.retrieve_video(video_id)


@mcp.tool(description=LIST_VIDEOS)
async def list_videos(limit: int = 10, after: str | None = None) -> str:
    return await video.list_videos(limit, after)


@mcp.tool(description=DOWNLOAD_VIDEO)
async def download_video(video_id: str, output_path: str) -> str:
    return await video.download_video(video_id, output_path)


# ==================== PRESET TOOLS ====================
@mcp.tool(description=LIST_PRESETS)
async def list_presets() -> str:
    return await presets.list_presets()


# ==================== SERVER ENTRYPOINT ====================
def main():
    """Run the MCP server over stdio.

    Environment is loaded at startup; paths and the API key are checked
    lazily when tools are called.
    """
    load_dotenv()
    logger.info("Sora MCP Server v%s running on stdio transport", __version__)
    mcp.run()


if __name__ == "__main__":
    main()
