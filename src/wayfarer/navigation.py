"""Navigation state for a single browser window: history, home and favorites."""

import logging

from .errors import NavigationError
from .messages import MessageCatalog
from .urls import PROTOCOL_PREFIX, complete_url, last_attempt

logger = logging.getLogger(__name__)


class NavigationModel:
    """Current page, back/forward history, home page and named favorites.

    Not thread-safe; callers must serialize access.
    """

    def __init__(
        self,
        messages: MessageCatalog | None = None,
        protocol_prefix: str = PROTOCOL_PREFIX,
    ) -> None:
        self._messages = messages or MessageCatalog()
        self._protocol_prefix = protocol_prefix
        self._history: list[str] = []
        self._cursor = -1
        self._home: str | None = None
        self._favorites: dict[str, str] = {}

    @property
    def current(self) -> str | None:
        """URL of the page being viewed, or None before the first visit."""
        if self._cursor < 0:
            return None
        return self._history[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def has_next(self) -> bool:
        """Check if there is a page after the current one."""
        return self._cursor < len(self._history) - 1

    def has_previous(self) -> bool:
        """Check if there is a page before the current one."""
        return self._cursor > 0

    def advance(self) -> str | None:
        """Move forward one page and return it, or None at the end of history."""
        if not self.has_next():
            return None
        self._cursor += 1
        logger.debug("Forward to %s (%d/%d)", self.current, self._cursor + 1, len(self._history))
        return self._history[self._cursor]

    def retreat(self) -> str:
        """Move back one page and return it.

        Raises:
            NavigationError: If there is no previous page. The cursor is
                left where it was.
        """
        if not self.has_previous():
            raise self._error("Back")
        self._cursor -= 1
        logger.debug("Back to %s (%d/%d)", self.current, self._cursor + 1, len(self._history))
        return self._history[self._cursor]

    def navigate_to(self, raw: str) -> str:
        """Resolve ``raw`` to a URL and make it the current page.

        Surrounding whitespace is ignored. Any forward history is discarded
        before the new page is appended.

        Raises:
            NavigationError: If ``raw`` cannot be completed to a valid URL.
                No state is changed.
        """
        raw = raw.strip()
        url = complete_url(raw, self.current, self._protocol_prefix)
        if url is None:
            attempted = last_attempt(raw, self._protocol_prefix)
            logger.warning("Rejected malformed URL: %r", attempted)
            raise self._error("MalformedURL", attempted)

        if self.has_next():
            dropped = len(self._history) - self._cursor - 1
            del self._history[self._cursor + 1:]
            logger.debug("Discarded %d forward history entries", dropped)

        self._history.append(url)
        self._cursor = len(self._history) - 1
        logger.debug("Navigated to %s", url)
        return url

    def get_home(self) -> str | None:
        """Return the home page URL, or None if none is set."""
        return self._home

    def set_home_to_current(self) -> None:
        """Make the current page the home page.

        Raises:
            NavigationError: If no page has been visited yet.
        """
        current = self.current
        if current is None:
            raise self._error("Null", "home")
        self._home = current
        logger.info("Home set to %s", current)

    def add_favorite(self, name: str) -> None:
        """Store the current page under ``name``, replacing any previous entry.

        Raises:
            NavigationError: If no page has been visited yet.
        """
        current = self.current
        if current is None:
            raise self._error("Null", name)
        self._favorites[name] = current
        logger.info("Favorite %r -> %s", name, current)

    def get_favorite(self, name: str) -> str | None:
        """Return the URL saved under ``name``, or None if there is none."""
        return self._favorites.get(name)

    def favorite_names(self) -> list[str]:
        """Return all favorite names, sorted."""
        return sorted(self._favorites)

    def _error(self, kind: str, *args: object) -> NavigationError:
        return NavigationError(self._messages.format(kind, *args), kind)
