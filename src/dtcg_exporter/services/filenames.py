import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lower-case, collapse non ``[a-z0-9]`` runs to ``-``, trim dashes."""
    return _NON_ALPHANUMERIC.sub("-", text.lower()).strip("-")


def generate_filename(collection_name: str, mode_name: str) -> str:
    """``"My Colors"`` + ``"Light Mode"`` -> ``"my-colors-light-mode.json"``.

    Distinct name pairs that slug to the same text collide; callers decide
    what to do about that.
    """
    return f"{slugify(collection_name)}-{slugify(mode_name)}.json"


__all__ = ["generate_filename", "slugify"]
