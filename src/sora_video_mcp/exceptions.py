# SPDX-License-Identifier: MIT
"""Exception hierarchy for the Sora MCP server.

Validator functions never raise these; they return structured results.
Tool implementations raise them internally and render them as text.
"""


class SoraMCPError(Exception):
    """Base exception for server-side failures."""


class ConfigurationError(SoraMCPError, RuntimeError):
    """Raised when required configuration is missing or invalid."""


class InputValidationError(SoraMCPError, ValueError):
    """Raised when tool arguments fail pre-dispatch validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))
