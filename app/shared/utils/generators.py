"""ID and value generators (CUID, global node ids, slugs)."""

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

SLUG_LENGTH = 10


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_global_id(tag: str) -> str:
    """Generate a global node id: a fresh CUID suffixed with the type tag.

    Args:
        tag: Registered type tag (e.g. ':user').

    Returns:
        Global id such as 'ck1abowner123:user'.
    """
    if not tag:
        raise ValueError("Type tag must be a non-empty string")
    return generate_cuid() + tag


def generate_slug() -> str:
    """Generate a short, URL-friendly token (prefix of a CUID2)."""
    return generate_cuid()[:SLUG_LENGTH]
