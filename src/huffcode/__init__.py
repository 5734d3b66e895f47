from .builder import CodeTableBuilder
from .errors import (
    DuplicateSymbolError,
    EmptyInputError,
    EmptyQueueError,
    FrequencyFormatError,
    HuffmanError,
    InvalidFrequencyError,
)
from .frequency import count_frequencies, parse_frequency_table
from .heap import PriorityQueue
from .table import build_code_table, format_code_table, iter_codes
from .tree import HuffmanTree, Node, build_tree

__all__ = [
    "CodeTableBuilder",
    "DuplicateSymbolError",
    "EmptyInputError",
    "EmptyQueueError",
    "FrequencyFormatError",
    "HuffmanError",
    "HuffmanTree",
    "InvalidFrequencyError",
    "Node",
    "PriorityQueue",
    "build_code_table",
    "build_tree",
    "count_frequencies",
    "format_code_table",
    "iter_codes",
    "parse_frequency_table",
]
