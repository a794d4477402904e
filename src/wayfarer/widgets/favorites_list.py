"""Favorites list widget for jumping to saved pages."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static


class FavoriteItem(ListItem):
    """A list item representing a named favorite."""

    def __init__(self, name: str, url: str) -> None:
        super().__init__()
        self.favorite_name = name
        self.url = url

    def compose(self) -> ComposeResult:
        yield Label(Text.assemble(self.favorite_name, "  ", (self.url, "dim")))


class FavoritesList(Vertical):
    """Widget listing the user's favorites."""

    DEFAULT_CSS = """
    FavoritesList {
        width: 1fr;
        height: 1fr;
    }

    FavoritesList > #favorites-header {
        background: $primary-background;
        color: $warning;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    FavoritesList > #favorites-list-view {
        height: 1fr;
    }

    FavoritesList > #favorites-status {
        padding: 1 2;
        color: $text-muted;
    }

    FavoritesList ListItem {
        padding: 0 1;
    }

    FavoritesList ListItem.--highlight {
        background: $accent;
    }
    """

    class FavoriteChosen(Message):
        """Message emitted when a favorite is selected with Enter or click."""

        def __init__(self, name: str) -> None:
            super().__init__()
            self.favorite_name = name

    def compose(self) -> ComposeResult:
        yield Static("FAVORITES", id="favorites-header")
        yield ListView(id="favorites-list-view")
        yield Static("No favorites yet", id="favorites-status")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#favorites-list-view", ListView)

    @property
    def status_label(self) -> Static:
        return self.query_one("#favorites-status", Static)

    def update_favorites(self, favorites: list[tuple[str, str]]) -> None:
        """Replace the list contents with (name, url) pairs."""
        list_view = self.list_view
        list_view.clear()

        if not favorites:
            self.status_label.update("No favorites yet")
            return

        self.status_label.update("")
        for name, url in favorites:
            list_view.append(FavoriteItem(name, url))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, FavoriteItem):
            event.stop()
            self.post_message(self.FavoriteChosen(event.item.favorite_name))
