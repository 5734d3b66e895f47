class HuffmanError(Exception):
    """Base class of every error raised by huffcode"""


class EmptyInputError(HuffmanError):
    pass


# Raised only when the builder's loop invariant is broken.
class EmptyQueueError(HuffmanError):
    pass


class DuplicateSymbolError(HuffmanError):
    def __init__(self, symbol: object) -> None:
        super().__init__(f"Duplicate symbol: {symbol!r}")
        self.symbol = symbol


class InvalidFrequencyError(HuffmanError):
    def __init__(self, symbol: object, frequency: object) -> None:
        super().__init__(f"Frequency of {symbol!r} must be a positive number, but got {frequency!r}")
        self.symbol = symbol
        self.frequency = frequency


class FrequencyFormatError(HuffmanError):
    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f'Line {line_number}: expected "SYMBOL COUNT", but got "{line}"')
        self.line_number = line_number
        self.line = line
