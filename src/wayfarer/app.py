"""Main Textual application for Wayfarer."""

import logging

from rich.text import Text

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Input, Static

from .config import Config
from .errors import NavigationError
from .messages import MessageCatalog
from .navigation import NavigationModel
from .widgets import FavoriteNameModal, FavoritesList

logger = logging.getLogger(__name__)


class WayfarerApp(App):
    """Wayfarer - single-window browser shell."""

    TITLE = "Wayfarer"
    SUB_TITLE = "Browser Navigation"

    CSS = """
    #address-bar {
        height: 3;
        width: 100%;
    }

    #address-bar Button {
        min-width: 8;
        margin: 0 0 0 1;
    }

    #address {
        width: 1fr;
    }

    #main-container {
        width: 100%;
        height: 1fr;
    }

    #page {
        width: 70%;
        height: 100%;
        border: solid $success;
        padding: 1 2;
    }

    #favorites {
        width: 30%;
        height: 100%;
        border: solid $accent;
    }

    #favorites:focus-within {
        border: solid cyan;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+b", "back", "Back"),
        Binding("ctrl+n", "next", "Next"),
        Binding("ctrl+o", "home", "Home"),
        Binding("ctrl+s", "set_home", "Set Home"),
        Binding("ctrl+d", "add_favorite", "Favorite"),
        Binding("ctrl+l", "focus_address", "Address", show=False),
    ]

    def __init__(self, config: Config, messages: MessageCatalog | None = None) -> None:
        super().__init__()
        self.config = config
        self.messages = messages or config.load_messages()
        self.model = NavigationModel(self.messages, config.protocol_prefix)

    def compose(self) -> ComposeResult:
        with Horizontal(id="address-bar"):
            yield Button("<", id="back-btn")
            yield Button(">", id="next-btn")
            yield Button("Home", id="home-btn")
            yield Input(id="address", placeholder="Enter an address")
            yield Button("Go", id="go-btn", variant="primary")
        with Horizontal(id="main-container"):
            with Vertical(id="page"):
                yield Static("", id="page-url")
                yield Static("", id="page-info")
            yield FavoritesList(id="favorites")
        yield Footer()

    def on_mount(self) -> None:
        """Open the start page, if configured, and focus the address bar."""
        if self.config.start_url:
            self.go(self.config.start_url)
        else:
            self._refresh_view()
        self.query_one("#address", Input).focus()

    def go(self, raw: str) -> str | None:
        """Navigate to user input, reporting failures instead of raising."""
        try:
            url = self.model.navigate_to(raw)
        except NavigationError as e:
            self.notify(e.message, severity="error")
            return None
        self._refresh_view()
        return url

    def _refresh_view(self) -> None:
        """Sync widgets with the navigation model."""
        model = self.model
        current = model.current

        self.query_one("#address", Input).value = current or ""
        self.query_one("#back-btn", Button).disabled = not model.has_previous()
        self.query_one("#next-btn", Button).disabled = not model.has_next()
        self.query_one("#home-btn", Button).disabled = model.get_home() is None

        if current is None:
            self.query_one("#page-url", Static).update(Text("No page loaded", style="dim"))
            self.query_one("#page-info", Static).update("")
        else:
            self.query_one("#page-url", Static).update(Text(current, style="bold"))
            info = f"Page {model.cursor + 1} of {len(model.history)}"
            home = model.get_home()
            if home is not None:
                info += f"  |  Home: {home}"
            self.query_one("#page-info", Static).update(info)

        favorites = [(name, model.get_favorite(name)) for name in model.favorite_names()]
        self.query_one("#favorites", FavoritesList).update_favorites(favorites)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "address":
            self.go(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            "back-btn": self.action_back,
            "next-btn": self.action_next,
            "home-btn": self.action_home,
        }
        if event.button.id == "go-btn":
            self.go(self.query_one("#address", Input).value)
        elif event.button.id in actions:
            actions[event.button.id]()

    def action_back(self) -> None:
        """Go to the previous page in history."""
        try:
            self.model.retreat()
        except NavigationError as e:
            self.notify(e.message, severity="error")
            return
        self._refresh_view()

    def action_next(self) -> None:
        """Go to the next page in history; no-op at the end."""
        if self.model.advance() is not None:
            self._refresh_view()

    def action_home(self) -> None:
        """Navigate to the home page."""
        home = self.model.get_home()
        if home is None:
            self.notify("No home page set", severity="warning")
            return
        self.go(home)

    def action_set_home(self) -> None:
        """Make the current page the home page."""
        try:
            self.model.set_home_to_current()
        except NavigationError as e:
            self.notify(e.message, severity="error")
            return
        self.notify(f"Home set to {self.model.get_home()}")
        self._refresh_view()

    def action_add_favorite(self) -> None:
        """Prompt for a name and save the current page as a favorite."""
        current = self.model.current
        if current is None:
            self.notify(self.messages.format("Null", "favorites"), severity="error")
            return
        self.push_screen(FavoriteNameModal(current), self._on_favorite_named)

    def _on_favorite_named(self, name: str | None) -> None:
        if not name:
            return
        try:
            self.model.add_favorite(name)
        except NavigationError as e:
            self.notify(e.message, severity="error")
            return
        self.notify(f"Added favorite '{name}'")
        self._refresh_view()

    def on_favorites_list_favorite_chosen(self, event: FavoritesList.FavoriteChosen) -> None:
        """Open a favorite by name."""
        url = self.model.get_favorite(event.favorite_name)
        if url is None:
            logger.debug("Favorite lookup missed: %r", event.favorite_name)
            self.notify(self.messages.format("NotInFav", event.favorite_name), severity="warning")
            return
        self.go(url)

    def action_focus_address(self) -> None:
        self.query_one("#address", Input).focus()


def run_app(config: Config) -> None:
    """Run the Wayfarer application."""
    app = WayfarerApp(config)
    app.run()
