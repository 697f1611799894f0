class HexColorError(Exception):
    """Base class for every error raised by hexcolor."""


class ParseHexColorError(HexColorError, ValueError):
    """
    Raised when a string is not a valid hexadecimal color.

    The offending input, after whitespace trimming, is kept in ``text``.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"{text} could not be parsed as a hex color")


class HexColorDomainError(HexColorError, ZeroDivisionError):
    """Raised when a color is divided by a zero scalar."""
