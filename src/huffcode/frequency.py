from collections import Counter
from collections.abc import Iterable

from loguru import logger

from .errors import FrequencyFormatError


# Counter keeps the order in which symbols first occur, which fixes the leaf order of the tree.
def count_frequencies(text: str, tokens: bool = False) -> list[tuple[str, int]]:
    if tokens:
        symbols = text.split()
    else:
        symbols = [ch for ch in text if not ch.isspace()]
    return list(Counter(symbols).items())


# Each line is "SYMBOL COUNT". Blank lines and lines starting with '#' are ignored.
def parse_frequency_table(lines: Iterable[str]) -> list[tuple[str, int]]:
    pairs: list[tuple[str, int]] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        fields = stripped.split()
        if len(fields) != 2 or not fields[1].isdecimal():
            logger.error(f"Malformed frequency table at line {line_number}")
            raise FrequencyFormatError(line_number, stripped)
        pairs.append((fields[0], int(fields[1])))
    return pairs
