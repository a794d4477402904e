"""Modal prompting for the name of a new favorite."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static


class FavoriteNameModal(ModalScreen[str | None]):
    """Ask for a favorite name. Dismisses with the name, or None on cancel."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    CSS = """
    FavoriteNameModal {
        align: center middle;
    }

    #favorite-name-container {
        width: 60;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #favorite-name-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #button-row {
        margin-top: 1;
        height: 3;
        align: center middle;
    }

    #button-row Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    def __init__(self, url: str) -> None:
        super().__init__()
        self.url = url

    def compose(self) -> ComposeResult:
        with Vertical(id="favorite-name-container"):
            yield Static("ADD FAVORITE", id="favorite-name-title")
            yield Label(self.url)
            yield Input(id="favorite-name-input", placeholder="Favorite name")
            with Horizontal(id="button-row"):
                yield Button("Save", id="save-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        self.query_one("#favorite-name-input", Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel-btn":
            self.dismiss(None)
        elif event.button.id == "save-btn":
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def _submit(self) -> None:
        name = self.query_one("#favorite-name-input", Input).value.strip()
        if not name:
            self.notify("Favorite name cannot be empty", severity="warning")
            return
        self.dismiss(name)
