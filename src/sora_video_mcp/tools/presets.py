# SPDX-License-Identifier: MIT
"""Static video generation presets and prompting guidance."""

import json
from types import MappingProxyType

from ..types import Preset

PRESETS: MappingProxyType[str, Preset] = MappingProxyType(
    {
        "Cinematic": {
            "prompt_tips": "Use 'cinematic shot', 'dramatic lighting', 'wide angle'",
            "recommended_settings": {"seconds": 10, "size": "1920x1080"},
        },
        "Social Media": {
            "prompt_tips": "Use 'vertical format', 'engaging', 'dynamic movement'",
            "recommended_settings": {"seconds": 15, "size": "720x1280"},
        },
        "Product Demo": {
            "prompt_tips": "Use 'clean background', 'product focus', 'smooth rotation'",
            "recommended_settings": {"seconds": 5, "size": "1080x1080"},
        },
        "Animation": {
            "prompt_tips": "Use 'animated style', 'cartoon', 'vibrant colors'",
            "recommended_settings": {"seconds": 20, "size": "1920x1080"},
        },
    }
)

BEST_PRACTICES: tuple[str, ...] = (
    "Be specific and descriptive in your prompts",
    "Include style references (cinematic, realistic, animated)",
    "Specify camera movements if needed",
    "Mention lighting and atmosphere details",
    "Keep prompts under 500 characters for best results",
)

RECOMMENDED_SIZES: tuple[str, ...] = (
    "16:9 (horizontal): 1920x1080",
    "9:16 (vertical): 720x1280",
    "1:1 (square): 1080x1080",
)

MODELS: tuple[str, ...] = (
    "sora-2: Standard model (recommended, reliable)",
    "sora-2-pro: Higher quality but may experience delays",
)


async def list_presets() -> str:
    """Describe the available presets, best practices, sizes, and models."""
    lines = ["Available Video Generation Presets:", ""]
    for name, preset in PRESETS.items():
        settings = json.dumps(preset["recommended_settings"], separators=(",", ":"))
        lines.append(f"{name}:")
        lines.append(f"  Prompt tips: {preset['prompt_tips']}")
        lines.append(f"  Recommended: {settings}")
        lines.append("")

    lines.append("Best Practices:")
    lines.extend(f"{i}. {tip}" for i, tip in enumerate(BEST_PRACTICES, start=1))
    lines.append("")
    lines.append("Recommended Video Sizes:")
    lines.extend(f"- {size}" for size in RECOMMENDED_SIZES)
    lines.append("")
    lines.append("Models:")
    lines.extend(f"- {model}" for model in MODELS)
    return "\n".join(lines)
