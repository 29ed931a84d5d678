"""lite_providers.config.defaults
==============================

Small, stable default values used across the package and the CLI. These can be
overridden via environment variables or an external configuration file.

Only plain constants live here; the module imports nothing from other
provider packages so it can be used anywhere without cycles.
"""

from __future__ import annotations

# ---- CLI defaults ----
# Provider selected by the CLI when none is specified.
PROVIDER_CLI_DEFAULT_PROVIDER = "openai"

# ---- Provider-specific defaults ----
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"

OPENROUTER_DEFAULT_MODEL = "openrouter/auto"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"

__all__ = [
    "PROVIDER_CLI_DEFAULT_PROVIDER",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_BASE_URL",
]
