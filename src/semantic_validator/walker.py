"""Depth-first traversal of parsed API description documents."""

from typing import Any, Iterator, Tuple, Union

Path = Tuple[Union[str, int], ...]


def walk(root: Any, base_path: Path = ()) -> Iterator[Tuple[Path, Any]]:
    """
    Yield every node of the document as a (path, node) pair.

    Nodes are visited pre-order: a mapping is yielded before its values, which
    follow in insertion order; list items follow in index order. Each call
    returns an independent generator, so rules can traverse the same document
    separately.

    Args:
        root: Document tree made of dicts, lists and scalars
        base_path: Path of the root node (empty for the document root)

    Returns:
        Iterator of (path, node) pairs
    """
    stack = [(base_path, root)]

    while stack:
        path, node = stack.pop()
        yield path, node

        if isinstance(node, dict):
            children = [(path + (key,), value) for key, value in node.items()]
        elif isinstance(node, list):
            children = [(path + (index,), item) for index, item in enumerate(node)]
        else:
            continue

        # Reversed so the first child is popped first
        stack.extend(reversed(children))
