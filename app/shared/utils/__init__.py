"""Shared utilities: id generators."""

from app.shared.utils.generators import (
    generate_cuid,
    generate_global_id,
    generate_slug,
)

__all__ = [
    "generate_cuid",
    "generate_global_id",
    "generate_slug",
]
