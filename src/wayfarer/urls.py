"""URL validation and completion of partially typed addresses."""

from urllib.parse import urlsplit

PROTOCOL_PREFIX = "http://"

SUPPORTED_SCHEMES = frozenset({"http", "https", "ftp", "file"})


def is_valid_url(candidate: str) -> bool:
    """Check whether a string is a well-formed absolute locator.

    A valid locator has a supported scheme and a host. ``file`` URLs may
    omit the host but must then carry a path.
    """
    if not candidate or any(ch.isspace() for ch in candidate):
        return False

    try:
        parts = urlsplit(candidate)
        # Accessing .port validates it
        parts.port
    except ValueError:
        return False

    if parts.scheme.lower() not in SUPPORTED_SCHEMES:
        return False

    if parts.scheme.lower() == "file":
        return bool(parts.netloc or parts.path)

    return bool(parts.hostname)


def last_attempt(raw: str, prefix: str = PROTOCOL_PREFIX) -> str:
    """Return the final candidate tried by complete_url."""
    return prefix + raw


def complete_url(
    raw: str, current: str | None = None, prefix: str = PROTOCOL_PREFIX
) -> str | None:
    """Resolve user input to an absolute URL.

    Tried in order, first valid wins:
        1. the input as an absolute URL
        2. the input relative to ``current`` (skipped when there is none)
        3. the input with ``prefix`` prepended

    Args:
        raw: Text typed by the user.
        current: URL of the page currently displayed, if any.
        prefix: Scheme prefix for the last fallback.

    Returns:
        The resolved URL, or None if every candidate is malformed.
    """
    candidates = [raw]
    if current is not None:
        candidates.append(f"{current}/{raw}")
    candidates.append(last_attempt(raw, prefix))

    for candidate in candidates:
        if is_valid_url(candidate):
            return candidate
    return None
