"""Nested DTCG token tree construction from slash-delimited names."""

from collections.abc import Iterable

from dtcg_exporter.domain.tokens import DTCGToken, TokenTree, is_token

PATH_SEPARATOR = "/"


def split_path(name: str) -> tuple[list[str], str]:
    """Split ``"a/b/c"`` into group keys ``["a", "b"]`` and leaf ``"c"``."""
    parts = name.split(PATH_SEPARATOR)
    return parts[:-1], parts[-1]


def insert_token(tree: TokenTree, name: str, token: DTCGToken | dict) -> None:
    """Place ``token`` at ``name`` inside ``tree``, creating groups on the way.

    A group key currently holding a token (or any non-group value) is
    replaced by an empty group: a later group wins over an earlier token of
    the same name.
    """
    groups, leaf = split_path(name)

    current = tree
    for part in groups:
        node = current.get(part)
        if not isinstance(node, dict) or is_token(node):
            node = {}
            current[part] = node
        current = node

    current[leaf] = token.to_dict() if isinstance(token, DTCGToken) else token


def build_tree(entries: Iterable[tuple[str, DTCGToken | dict]]) -> TokenTree:
    """Build one tree from ``(name, token)`` pairs, keeping input order."""
    tree: TokenTree = {}
    for name, token in entries:
        insert_token(tree, name, token)
    return tree


def iter_tokens(tree: TokenTree, prefix: str = "") -> Iterable[tuple[str, dict]]:
    """Yield ``(dot.path, token)`` for every token in ``tree``, depth first."""
    for key, node in tree.items():
        if not isinstance(node, dict):
            continue
        path = f"{prefix}.{key}" if prefix else key
        if is_token(node):
            yield path, node
        else:
            yield from iter_tokens(node, path)


def count_tokens(tree: TokenTree) -> int:
    return sum(1 for _ in iter_tokens(tree))


__all__ = [
    "PATH_SEPARATOR",
    "build_tree",
    "count_tokens",
    "insert_token",
    "iter_tokens",
    "split_path",
]
