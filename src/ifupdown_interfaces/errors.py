"""Exception classes for ifupdown-interfaces.

Provides standardized exceptions for error handling throughout the package.
I/O failures are not wrapped: ``OSError`` from reading or writing a file
reaches the caller unchanged.
"""

from __future__ import annotations


class InterfacesError(Exception):
    """Base exception for all ifupdown-interfaces errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(InterfacesError):
    """Error during interfaces parsing.

    Raised the moment a line matches no grammar rule. Parsing is not
    resumable; the offending line is kept on the exception.
    """

    def __init__(
        self,
        message: str,
        line: str = "",
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with the offending line and its location.

        Args:
            message: Error description
            line: Trimmed text of the line that failed to parse
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.line = line
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
