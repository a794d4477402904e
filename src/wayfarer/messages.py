"""Error message catalog used to render human-readable navigation errors."""

import logging
import tomllib
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType({
    "Back": "Cannot go back: there is no previous page",
    "Null": "Cannot use {} before a page has been visited",
    "NotInFav": "{} is not in favorites",
    "MalformedURL": "Could not load {}: malformed URL",
})


class MessageCatalog:
    """Maps message-kind identifiers to format templates."""

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        merged = dict(DEFAULT_MESSAGES)
        if templates:
            merged.update(templates)
        self._templates: Mapping[str, str] = MappingProxyType(merged)

    def format(self, kind: str, *args: object) -> str:
        """Render the template for ``kind`` with positional arguments.

        Never raises: an unknown kind or a template that does not match the
        arguments falls back to the kind followed by the arguments.
        """
        template = self._templates.get(kind)
        if template is not None:
            try:
                return template.format(*args)
            except (AttributeError, IndexError, KeyError, TypeError, ValueError):
                logger.warning("Bad message template for %s: %r", kind, template)
        return " ".join([kind, *(str(a) for a in args)])

    @classmethod
    def load(cls, path: Path) -> "MessageCatalog":
        """Load templates from the ``[messages]`` table of a TOML file.

        Keys absent from the file keep their built-in defaults. A
        ``messages`` entry that is not a table is ignored.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        table = data.get("messages", {})
        if not isinstance(table, dict):
            logger.warning("Ignoring %s: 'messages' is not a table", path)
            return cls()

        templates = {str(k): str(v) for k, v in table.items()}
        logger.info("Loaded %d message template(s) from %s", len(templates), path)
        return cls(templates)
