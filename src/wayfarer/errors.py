"""Error types for Wayfarer."""


class NavigationError(Exception):
    """Raised when a navigation operation is impossible.

    Attributes:
        message: Human-readable text produced by the message catalog.
        kind: Message-kind identifier that produced the text
            ("Back", "Null" or "MalformedURL").
    """

    def __init__(self, message: str, kind: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
