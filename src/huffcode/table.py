from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING

from loguru import logger
from toolz import pipe

if TYPE_CHECKING:
    from .tree import Node

# A root that is itself a leaf has an empty path; it gets a one-bit code instead.
SINGLE_LEAF_CODE = "0"


def iter_codes(root: "Node") -> Iterator[tuple[Hashable, str]]:
    """Yield (symbol, code) for every leaf, left subtree first"""
    if root.is_leaf():
        yield root.symbol, SINGLE_LEAF_CODE
        return

    stack: list[tuple["Node", str]] = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            yield node.symbol, code
            continue
        # Pushed right first so that the left subtree is visited first.
        stack.append((node.right, code + "1"))
        stack.append((node.left, code + "0"))


def build_code_table(root: "Node") -> dict[Hashable, str]:
    table = dict(iter_codes(root))
    logger.debug(f"Generated {len(table)} codes")
    return table


def format_code_table(table: dict[Hashable, str]) -> list[str]:
    # Sort by the length of the code and then by the code
    return pipe(
        table.items(),
        lambda arg: sorted(arg, key=lambda x: (len(x[1]), x[1])),
        lambda arg: map(lambda x: f"Symbol: {x[0]}, Code: {x[1]}", arg),
        list,
    )
