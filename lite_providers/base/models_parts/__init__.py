"""One-class-per-file DTO implementations.

Prefer importing from `lite_providers.base.models` for the stable surface.
"""
