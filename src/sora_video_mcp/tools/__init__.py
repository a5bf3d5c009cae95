# SPDX-License-Identifier: MIT
"""MCP tool implementations for Sora video generation.

This package contains the business logic behind each FastMCP tool:
- video: upstream Sora operations (generate, remix, retrieve, list, download)
- presets: static generation presets and best practices

Tools are registered with FastMCP in ``sora_video_mcp.server``.
"""
