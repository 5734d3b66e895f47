from collections.abc import Hashable, Iterable, Mapping
from typing import Self

from loguru import logger
from toolz import pipe

from .errors import DuplicateSymbolError, EmptyInputError, InvalidFrequencyError
from .heap import PriorityQueue
from .table import build_code_table

Symbol = Hashable
Frequencies = Iterable[tuple[Symbol, int | float]] | Mapping[Symbol, int | float]


class Node:
    def __init__(
        self, frequency: int | float, symbol: Symbol | None = None, left: Self | None = None, right: Self | None = None
    ) -> None:
        self.frequency = frequency
        self.symbol = symbol
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return f"frequency: {self.frequency}, symbol: {self.symbol}, leaf: {self.is_leaf()}"

    def is_leaf(self) -> bool:
        return (self.left is None) and (self.right is None)

    @classmethod
    def merge(cls, left: Self, right: Self) -> Self:
        return cls(left.frequency + right.frequency, None, left, right)


def _is_valid_frequency(frequency: object) -> bool:
    if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
        return False
    return frequency > 0


def _validate(pairs: list[tuple[Symbol, int | float]]) -> list[tuple[Symbol, int | float]]:
    if not pairs:
        logger.error("Cannot build a Huffman tree from an empty frequency list")
        raise EmptyInputError("The frequency list is empty")

    seen: set[Symbol] = set()
    for symbol, frequency in pairs:
        if symbol in seen:
            logger.error(f"Duplicate symbol {symbol!r} in the frequency list")
            raise DuplicateSymbolError(symbol)
        if not _is_valid_frequency(frequency):
            logger.error(f"Invalid frequency {frequency!r} for symbol {symbol!r}")
            raise InvalidFrequencyError(symbol, frequency)
        seen.add(symbol)
    return pairs


def build_tree(frequencies: Frequencies) -> Node:
    """Build a Huffman tree from (symbol, frequency) pairs and return its root.

    Leaves are queued in input order. On each step the first extracted node
    becomes the left child of the merged node and the second one the right
    child, so the same ordered input always produces the same tree.
    """
    pairs = pipe(
        frequencies,
        lambda arg: arg.items() if isinstance(arg, Mapping) else arg,
        list,
        _validate,
    )

    queue = PriorityQueue()
    for symbol, frequency in pairs:
        queue.insert(Node(frequency, symbol))
    logger.debug(f"Queued {queue.size()} leaves")

    while queue.size() > 1:
        left = queue.extract_min()
        right = queue.extract_min()
        queue.insert(Node.merge(left, right))

    root = queue.extract_min()
    logger.debug(f"Built a Huffman tree (total frequency: {root.frequency})")
    return root


class HuffmanTree:
    def __init__(self, root: Node) -> None:
        self._root = root
        self.height = self._measure_height(root)
        self.leaf_count = sum(1 for _ in self._leaves(root))

    @property
    def root(self) -> Node:
        return self._root

    @classmethod
    def create_huffman_tree(cls, frequencies: Frequencies) -> Self:
        return cls(build_tree(frequencies))

    def code_table(self) -> dict[Symbol, str]:
        return build_code_table(self._root)

    def print(self) -> None:
        for line in self.render():
            print(line)

    # The right subtree is rendered above its parent, the left one below.
    def render(self) -> list[str]:
        lines: list[str] = []
        stack: list[tuple[Node, int, bool]] = [(self._root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if node.is_leaf():
                lines.append(f'{" " * 4 * depth} -> [{node.symbol}: {node.frequency}]')
            elif expanded:
                lines.append(f'{" " * 4 * depth} -> ({node.frequency})')
            else:
                stack.append((node.left, depth + 1, False))
                stack.append((node, depth, True))
                stack.append((node.right, depth + 1, False))
        return lines

    @staticmethod
    def _measure_height(root: Node) -> int:
        height = 0
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            if not node.is_leaf():
                stack.append((node.left, depth + 1))
                stack.append((node.right, depth + 1))
        return height

    @staticmethod
    def _leaves(root: Node) -> Iterable[Node]:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)
