"""Textual front-end: renders controller snapshots and forwards button presses."""

import logging

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from takeout.config import Config
from takeout.controller import TakeoutController
from takeout.models import LoadStatus, Page, SessionView

logger = logging.getLogger(__name__)

HOME_BLESSING = (
    "May you be peaceful\n"
    "May you be healthy\n"
    "May you be happy\n"
    "May you gift to the world"
)
LOADING_TEXT = "Loading affirmations..."
COMPLETION_TEXT = "Have a great day! Bye <3"


def render_body(view: SessionView, api_url: str) -> str:
    """Main text block for a snapshot."""
    if view.status is LoadStatus.LOADING and view.page is Page.HOME:
        return LOADING_TEXT
    if view.status is LoadStatus.ERROR:
        return (
            f"Error loading affirmations: {view.error}\n\n"
            f"Please make sure the backend is running at {api_url} "
            "and check your connection."
        )
    if view.page is Page.HOME:
        return HOME_BLESSING
    if view.page is Page.COMPLETED:
        return COMPLETION_TEXT
    # takeout page with no data yet renders nothing
    return view.text or ""


class TakeoutApp(App):
    """Home → Takeout → Completed."""

    TITLE = "Takeout"

    CSS = """
    Screen { align: center middle; }
    #body { width: 60; content-align: center middle; text-align: center; padding: 1 2; }
    .row { height: auto; width: auto; align: center middle; }
    .row Button { margin: 0 1; }
    #title { text-style: bold; text-align: center; width: 60; }
    """

    BINDINGS = [
        Binding("left", "previous", "Previous"),
        Binding("right", "next", "Next"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config: Config, controller: TakeoutController | None = None) -> None:
        super().__init__()
        self.takeout_config = config
        self.controller = controller or TakeoutController(config)
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        with Vertical(classes="row"):
            yield Static("Takeout", id="title")
            with Horizontal(classes="row"):
                yield Button("←", id="previous")
                yield Static(LOADING_TEXT, id="body")
                yield Button("→", id="next")
            with Horizontal(id="home-options", classes="row"):
                yield Button("Takeout", id="takeout", variant="primary")
                yield Button("Salad mix", id="salad-mix")
                yield Button("Pick your adventure", id="adventure")
            with Horizontal(id="completion-actions", classes="row"):
                yield Button("Exit", id="exit")
                yield Button("Repeat", id="repeat", variant="primary")

    def on_mount(self) -> None:
        self._unsubscribe = self.controller.subscribe(self.render_view)
        self.controller.mount()
        self.render_view(self.controller.view())
        self.run_worker(self.controller.load(), exclusive=True, name="resolve")

    def on_unmount(self) -> None:
        self.controller.unmount()
        if self._unsubscribe is not None:
            self._unsubscribe()

    def render_view(self, view: SessionView) -> None:
        ready = view.status is LoadStatus.READY
        on_takeout = ready and view.page is Page.TAKEOUT

        self.query_one("#body", Static).update(render_body(view, self.takeout_config.api.url))
        self.query_one("#title", Static).display = ready and (
            view.page is Page.COMPLETED or (on_takeout and view.total > 0)
        )
        self.query_one("#home-options").display = (
            ready and view.page is Page.HOME and view.controls_visible
        )
        self.query_one("#completion-actions").display = ready and view.page is Page.COMPLETED

        previous = self.query_one("#previous", Button)
        following = self.query_one("#next", Button)
        previous.display = following.display = on_takeout and view.total > 0
        previous.disabled = not view.can_go_back
        following.disabled = not view.can_go_forward

    # --- Actions ---

    def action_previous(self) -> None:
        if self.controller.view().can_go_back:
            self.controller.previous()

    def action_next(self) -> None:
        if self.controller.view().can_go_forward:
            self.controller.next()

    @on(Button.Pressed, "#takeout")
    def handle_takeout(self) -> None:
        self.controller.start()

    @on(Button.Pressed, "#salad-mix")
    def handle_salad_mix(self) -> None:
        self.notify("Salad mix coming soon!")

    @on(Button.Pressed, "#adventure")
    def handle_adventure(self) -> None:
        self.notify("Pick your adventure coming soon!")

    @on(Button.Pressed, "#previous")
    def handle_previous(self) -> None:
        self.action_previous()

    @on(Button.Pressed, "#next")
    def handle_next(self) -> None:
        self.action_next()

    @on(Button.Pressed, "#exit")
    def handle_exit(self) -> None:
        self.controller.exit()

    @on(Button.Pressed, "#repeat")
    def handle_repeat(self) -> None:
        self.controller.repeat()
