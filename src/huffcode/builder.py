import sys

from loguru import logger

from .table import build_code_table
from .tree import Frequencies, HuffmanTree, Symbol


class CodeTableBuilder:
    def __init__(self, is_logging: bool = False) -> None:
        self._is_logging = is_logging

        logger.remove()
        logger.add(sys.stdout, filter=lambda _: self._is_logging)

        # If a message higher than ERROR is logged while _is_logging is False, log it to stderr regardless of the logging flag
        logger.add(sys.stderr, level="ERROR", filter=lambda _: not self._is_logging)

    def build_tree(self, frequencies: Frequencies) -> HuffmanTree:
        logger.info("Building the Huffman tree")
        tree = HuffmanTree.create_huffman_tree(frequencies)
        logger.info(f"Leaves: {tree.leaf_count}, height: {tree.height}, total frequency: {tree.root.frequency}")
        return tree

    def code_table(self, tree: HuffmanTree) -> dict[Symbol, str]:
        table = build_code_table(tree.root)
        logger.info("The code table has been generated successfully")
        return table

    def build(self, frequencies: Frequencies) -> dict[Symbol, str]:
        return self.code_table(self.build_tree(frequencies))
