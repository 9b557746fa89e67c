"""Modal dialogs: text prompt, card editor, confirmation."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from corkboard.model.board import CardView
from corkboard.model.card import format_due_date

DIALOG_CSS = """
{name} {{
    align: center middle;
}}
{name} #dialog {{
    width: 60;
    height: auto;
    border: thick $primary;
    background: $surface;
    padding: 1 2;
}}
{name} #message {{
    margin-bottom: 1;
}}
{name} #buttons {{
    width: 100%;
    height: 3;
    align: center middle;
}}
{name} Button {{
    margin: 0 2;
}}
"""


class ConfirmDialog(ModalScreen[bool]):
    """Yes/no question. Dismisses with True only on confirm."""

    DEFAULT_CSS = DIALOG_CSS.format(name="ConfirmDialog")
    BINDINGS = [Binding("escape", "cancel", "Cancel", show=False)]

    def __init__(self, message: str, confirm_text: str = "Delete"):
        super().__init__()
        self.message = message
        self.confirm_text = confirm_text

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(self.message, id="message")
            with Horizontal(id="buttons"):
                yield Button("Cancel", id="no")
                yield Button(self.confirm_text, id="yes", variant="error")

    def on_mount(self) -> None:
        self.query_one("#yes", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_cancel(self) -> None:
        self.dismiss(False)


class TextPrompt(ModalScreen[str | None]):
    """Single-line text entry. Dismisses with the text, or None on escape."""

    DEFAULT_CSS = DIALOG_CSS.format(name="TextPrompt")
    BINDINGS = [Binding("escape", "cancel", "Cancel", show=False)]

    def __init__(self, title: str, value: str = "", placeholder: str = "", max_length: int = 100):
        super().__init__()
        self.prompt_title = title
        self.initial_value = value
        self.placeholder = placeholder
        self.max_length = max_length

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.prompt_title, id="message")
            yield Input(self.initial_value, placeholder=self.placeholder, max_length=self.max_length, id="prompt-input")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class CardEditor(ModalScreen[dict | None]):
    """Edit a card's title, description and due date.

    Dismisses with ``{"text", "description", "due"}`` (strings, unparsed)
    or None on escape.
    """

    DEFAULT_CSS = DIALOG_CSS.format(name="CardEditor")
    BINDINGS = [Binding("escape", "cancel", "Cancel", show=False)]

    def __init__(self, card: CardView):
        super().__init__()
        self.card = card

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label("Title")
            yield Input(self.card.text, placeholder="e.g. Design database schema", max_length=100, id="card-text")
            yield Label("Description")
            yield Input(
                self.card.description,
                placeholder="Add a more detailed description...",
                max_length=250,
                id="card-description",
            )
            yield Label("Due date")
            yield Input(format_due_date(self.card.due_date), placeholder="YYYY-MM-DD", id="card-due")
            with Horizontal(id="buttons"):
                yield Button("Save", id="save", variant="primary")

    def _values(self) -> dict:
        return {
            "text": self.query_one("#card-text", Input).value,
            "description": self.query_one("#card-description", Input).value,
            "due": self.query_one("#card-due", Input).value,
        }

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(self._values())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.dismiss(self._values())

    def action_cancel(self) -> None:
        self.dismiss(None)
