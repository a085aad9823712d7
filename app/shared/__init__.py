"""Shared cross-cutting helpers (logging, id generators)."""
