"""
Spy Cat Agency console.
Spy cat screen - list, create, inline salary edit and delete against the REST backend.
"""

import sys
from typing import Callable, List

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Static, Button, Input, DataTable
from textual.screen import Screen, ModalScreen

from spycats.core import config
from spycats.core.state import SpyCatsController, DELETE_PROMPT
from spycats.api.client import SpyCatsClient
from util.logging import logger
from . import views

class ConfirmScreen(ModalScreen[bool]):
    """Blocking yes/no prompt."""

    def __init__(self, prompt: str):
        super().__init__()
        self.prompt = prompt

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self.prompt, classes="confirm-prompt"),
            Horizontal(
                Button("Yes, remove", id="confirm-yes", variant="error"),
                Button("Cancel", id="confirm-no", variant="primary"),
                classes="confirm-buttons",
            ),
            id="confirm-container",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")

class SpyCatsScreen(Screen):
    """Main spy cat screen."""

    def __init__(self, controller: SpyCatsController):
        super().__init__()
        self.controller = controller
        self._row_ids: List[int] = []

    def compose(self) -> ComposeResult:
        yield Static(views.LOADING_MESSAGE, id="loading")
        yield Container(
            Static(views.TITLE, classes="title"),
            Static(views.SUBTITLE, classes="subtitle"),
            Static("", id="error-banner"),
            Container(
                Static(views.FORM_TITLE, classes="section-title"),
                Horizontal(
                    *[
                        Vertical(
                            Static(label, classes="label"),
                            Input(placeholder=placeholder, id=f"form-{field}"),
                            classes="form-field",
                        )
                        for field, label, placeholder in views.FORM_FIELDS
                    ],
                    id="form-fields",
                ),
                Static("", id="form-error"),
                Button(views.submit_label(False), id="submit-button", variant="primary"),
                id="form-section",
            ),
            Container(
                Static(views.list_heading(0), id="list-heading", classes="section-title"),
                Static(views.EMPTY_LIST_MESSAGE, id="empty-message"),
                DataTable(id="cats-table", cursor_type="row"),
                Horizontal(
                    Button("Edit", id="edit-button", variant="primary"),
                    Button("Delete", id="delete-button", variant="error"),
                    id="row-actions",
                ),
                Horizontal(
                    Static("", id="edit-label"),
                    Input(id="edit-salary"),
                    Button("Confirm", id="confirm-edit", variant="success"),
                    Button("Discard", id="discard-edit", variant="error"),
                    id="edit-bar",
                ),
                id="list-section",
            ),
            id="content",
        )

    def on_mount(self) -> None:
        self.query_one("#cats-table", DataTable).add_columns(*views.TABLE_COLUMNS)
        self.refresh_view()
        self.run_in_background(self.controller.load_cats)

    def run_in_background(self, operation: Callable, *args) -> None:
        """Run a blocking controller operation off the event loop, then re-render."""
        def job():
            operation(*args)
            self.app.call_from_thread(self.refresh_view)

        self.run_worker(job, thread=True)

    def refresh_view(self) -> None:
        """Re-render every widget from controller state."""
        c = self.controller

        self.query_one("#loading").display = c.loading
        self.query_one("#content").display = not c.loading

        banner = self.query_one("#error-banner", Static)
        banner.update(c.error)
        banner.display = bool(c.error)

        form_error = self.query_one("#form-error", Static)
        form_error.update(c.form_error)
        form_error.display = bool(c.form_error)

        for field, _, _ in views.FORM_FIELDS:
            field_input = self.query_one(f"#form-{field}", Input)
            value = getattr(c.form, field)
            if field_input.value != value:
                field_input.value = value

        submit = self.query_one("#submit-button", Button)
        submit.disabled = c.submitting
        submit.label = views.submit_label(c.submitting)

        self.query_one("#list-heading", Static).update(views.list_heading(len(c.cats)))

        placeholder = views.list_placeholder(c.cats)
        empty = self.query_one("#empty-message", Static)
        empty.update(placeholder or "")
        empty.display = placeholder is not None

        table = self.query_one("#cats-table", DataTable)
        table.clear()
        for cat in c.cats:
            table.add_row(*views.cat_row(cat, c.editing_id), key=str(cat.id))
        self._row_ids = [cat.id for cat in c.cats]
        table.display = placeholder is None

        editing = c.editing_id is not None
        self.query_one("#row-actions").display = bool(c.cats) and not editing
        self.query_one("#edit-bar").display = editing
        if editing:
            self.query_one("#edit-label", Static).update(views.edit_label(c.find_cat(c.editing_id)))
            self.query_one("#confirm-edit", Button).disabled = c.is_edit_invalid

    def _selected_cat_id(self):
        table = self.query_one("#cats-table", DataTable)
        if not self._row_ids or not 0 <= table.cursor_row < len(self._row_ids):
            return None
        return self._row_ids[table.cursor_row]

    def on_input_changed(self, event: Input.Changed) -> None:
        input_id = event.input.id or ""
        if input_id.startswith("form-"):
            self.controller.update_form(input_id[len("form-"):], event.value)
        elif input_id == "edit-salary":
            self.controller.edit_salary = event.value
            self.query_one("#confirm-edit", Button).disabled = self.controller.is_edit_invalid

    def on_input_submitted(self, event: Input.Submitted) -> None:
        input_id = event.input.id or ""
        if input_id.startswith("form-"):
            self.submit_form()
        elif input_id == "edit-salary" and not self.controller.is_edit_invalid:
            self.confirm_edit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id

        if button_id == "submit-button":
            self.submit_form()
        elif button_id == "edit-button":
            self.start_edit()
        elif button_id == "delete-button":
            self.delete_selected()
        elif button_id == "confirm-edit":
            self.confirm_edit()
        elif button_id == "discard-edit":
            self.cancel_edit()

    def submit_form(self) -> None:
        if self.controller.submitting:
            return
        submit = self.query_one("#submit-button", Button)
        submit.disabled = True
        submit.label = views.submit_label(True)
        self.run_in_background(self.controller.submit)

    def start_edit(self) -> None:
        cat_id = self._selected_cat_id()
        if cat_id is None:
            return
        self.controller.start_edit(cat_id)
        self.refresh_view()
        edit_input = self.query_one("#edit-salary", Input)
        edit_input.value = self.controller.edit_salary
        edit_input.focus()

    def confirm_edit(self) -> None:
        cat_id = self.controller.editing_id
        if cat_id is None:
            return
        self.run_in_background(self.controller.confirm_edit, cat_id)

    def cancel_edit(self) -> None:
        self.controller.cancel_edit()
        self.refresh_view()

    def delete_selected(self) -> None:
        cat_id = self._selected_cat_id()
        if cat_id is None:
            return

        def on_answer(confirmed: bool) -> None:
            self.run_in_background(self.controller.delete_cat, cat_id, lambda _prompt: confirmed)

        self.app.push_screen(ConfirmScreen(DELETE_PROMPT), on_answer)

class SpyCatsApp(App):
    """Spy Cat Agency TUI Application."""

    CSS = """
    .title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
        color: cyan;
    }

    .subtitle {
        text-align: center;
        margin-bottom: 1;
        color: gray;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
        color: cyan;
    }

    #loading {
        width: 100%;
        height: 100%;
        content-align: center middle;
    }

    #error-banner {
        background: darkred;
        border: solid red;
        padding: 0 1;
        margin: 0 1 1 1;
    }

    #form-section, #list-section {
        width: 100%;
        height: auto;
        margin-bottom: 1;
        padding: 1;
        border: solid white;
    }

    #form-fields, #row-actions, #edit-bar {
        height: auto;
    }

    .form-field {
        height: auto;
        width: 1fr;
    }

    #form-error {
        color: red;
    }

    #empty-message {
        color: gray;
    }

    #cats-table {
        height: auto;
        max-height: 20;
    }

    #edit-label {
        width: auto;
        padding: 1 1 0 0;
    }

    #edit-salary {
        width: 20;
    }

    #confirm-container {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick red;
        background: $surface;
    }

    ConfirmScreen {
        align: center middle;
    }

    .confirm-buttons {
        height: auto;
        margin-top: 1;
    }
    """

    TITLE = "Spy Cat Agency"

    def __init__(self, client: SpyCatsClient):
        super().__init__()
        self.client = client
        self.controller = SpyCatsController(client)

    def on_mount(self) -> None:
        """Show the spy cat screen and start the initial load."""
        logger.info(f"Spy Cat Agency console started against {self.client.base_url}")
        self.push_screen(SpyCatsScreen(self.controller))

    def on_unmount(self) -> None:
        self.client.close()

    def on_key(self, event) -> None:
        """Handle global key events."""
        if event.key == "q":
            logger.info("Spy Cat Agency console exit requested by user")
            self.exit(message="Spy Cat Agency console exited by user request")
        elif event.key == "escape" and self.controller.editing_id is not None:
            screen = self.screen
            if isinstance(screen, SpyCatsScreen):
                screen.cancel_edit()

def main():
    """Console entry point."""
    try:
        settings = config.validate_config()
        if isinstance(settings, str):
            print(f"❌ {settings}")
            sys.exit(1)

        print(f"🚀 Starting Spy Cat Agency console against {settings['api_url']}...")
        app = SpyCatsApp(SpyCatsClient(settings["api_url"]))
        app.run()

    except KeyboardInterrupt:
        print("\nℹ️  Console interrupted by user")
        logger.info("Console exited via keyboard interrupt")
    except Exception as e:
        error_msg = f"Console startup failed: {e}"
        print(f"❌ {error_msg}")
        logger.error(error_msg)
        sys.exit(1)

if __name__ == "__main__":
    main()
