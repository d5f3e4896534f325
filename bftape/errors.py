"""Exceptions raised by the loader, the configuration layer and the interpreter."""


class BrainfuckError(Exception):
    """Base class for every error raised by bftape."""


class ConfigurationError(BrainfuckError):
    """Invalid configuration or malformed combined program text.

    Always raised before execution starts.
    """


class UnbalancedBracketError(BrainfuckError):
    """A '[' or ']' without a matching counterpart was reached at runtime."""

    def __init__(self, position, bracket):
        self.position = position
        self.bracket = bracket
        super().__init__(f"Unmatched '{bracket}' at position {position}")
