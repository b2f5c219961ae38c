"""ComposerApp — chat TUI that stages screenshots and renders generated code."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from screen_to_code.l1_entities.config import AppConfig
from screen_to_code.l1_entities.staged_images import is_image_path
from screen_to_code.l3_interface_adapters.controllers.composer_controller import ComposerController
from screen_to_code.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from screen_to_code.l4_frameworks_and_drivers.messages import RemoveImageRequested, SendFinished
from screen_to_code.l4_frameworks_and_drivers.widgets.attach_modal import AttachModal
from screen_to_code.l4_frameworks_and_drivers.widgets.conversation_panel import ConversationPanel
from screen_to_code.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from screen_to_code.l4_frameworks_and_drivers.widgets.staged_images_bar import StagedImagesBar
from screen_to_code.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('stc.app')


class ComposerApp(TextualApp):
    """Stage up to N screenshots, send them through the proxy, browse the replies."""

    CSS_PATH = 'app.tcss'

    BINDINGS = [
        Binding('ctrl+o', 'attach', 'Attach screenshots by path', priority=True),
        Binding('ctrl+s', 'send', 'Send staged screenshots', priority=True),
        Binding('tab', 'focus_next', 'Switch focus', show=False),
        Binding('f1', 'show_help', 'Toggle this help', priority=True),
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
    ]

    def __init__(
        self,
        config: AppConfig,
        controller: ComposerController | None = None,
        log_dir: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config

        if log_dir is not None:
            setup_file_logging(log_dir)

        # Controller (injected or created with default wiring)
        if controller is not None:
            self._controller = controller
        else:  # pragma: no cover -- composition-root wiring; controller always injected in tests
            from screen_to_code.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: only wired when no controller injected (non-test path)
                ComposerContainer,
            )

            self._controller = ComposerContainer(config).controller

    def compose(self) -> ComposeResult:
        yield Static('  screen-to-code | screenshots in, HTML/Tailwind out', id='header')
        yield ConversationPanel(id='conversation')
        yield StagedImagesBar(id='staged-images')
        yield Input(placeholder='Describe the page (optional), then ctrl+s to send', id='message-input')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.mode_label = 'Composer'
        bar.image_max = self._controller.staged.max_images
        bar.keybinding_hints = r'\[ctrl+o] attach  \[ctrl+s] send  \[F1] help  \[ctrl+q] quit'
        self.query_one('#message-input', Input).focus()
        self.set_interval(0.2, self._refresh_status_bar)

    def _refresh_status_bar(self) -> None:
        try:
            bar = self.query_one('#status-bar', StatusBar)
            bar.image_count = len(self._controller.staged)
            bar.turn_count = len(self._controller.turns)
            bar.sending = self._controller.is_sending
            bar.refresh()
        except Exception:  # noqa: S110 -- TUI race guard; widget may not exist during startup  # pragma: no cover
            pass

    async def _sync_staged(self) -> None:
        await self.query_one('#staged-images', StagedImagesBar).update_images(self._controller.staged.paths)
        self._refresh_status_bar()

    # --- Message Handlers ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == 'message-input':
            self._controller.text = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == 'message-input':
            self.action_send()

    async def on_remove_image_requested(self, message: RemoveImageRequested) -> None:
        if self._controller.remove_image(message.index):
            await self._sync_staged()

    async def on_send_finished(self, message: SendFinished) -> None:
        outcome = message.outcome
        if outcome.turn is not None:
            self.query_one('#conversation', ConversationPanel).append_turn(outcome.turn)
        elif outcome.error:
            self.notify(outcome.error, severity='error', timeout=6)
        self.query_one('#message-input', Input).value = ''
        await self._sync_staged()

    # --- Workers ---

    def _run_send_worker(self) -> None:
        async def _send_task() -> None:
            outcome = await self._controller.finish_send()
            self.post_message(SendFinished(outcome))

        self.run_worker(_send_task, exclusive=True, group='send')

    # --- Actions ---

    def action_send(self) -> None:
        if self._controller.is_sending:
            self.notify('Already generating — please wait', severity='warning', timeout=3)
            return
        turn = self._controller.begin_send()
        if turn is None:  # pragma: no cover -- guarded above
            return
        self.query_one('#conversation', ConversationPanel).append_turn(turn)
        self._refresh_status_bar()
        self._run_send_worker()

    def action_attach(self) -> None:
        if self._controller.is_sending:
            self.notify('Cannot attach while generating', severity='warning', timeout=3)
            return
        self.push_screen(AttachModal(remaining=self._controller.staged.remaining), callback=self._on_attach_result)

    async def _on_attach_result(self, paths: list[str] | None) -> None:
        if not paths:
            return
        files: list[Path] = []
        for raw in paths:
            path = Path(raw).expanduser()
            if not path.is_file():
                self.notify(f'Not a file: {raw}', severity='warning', timeout=4)
            elif not is_image_path(path):
                self.notify(f'Not an image: {raw}', severity='warning', timeout=4)
            else:
                files.append(path)
        accepted = self._controller.attach_images(files)
        log.info('Attached %d of %d image(s)', accepted, len(files))
        await self._sync_staged()

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return
        max_images = self._controller.staged.max_images
        intro = (
            '### Usage\n'
            f'Attach up to {max_images} screenshots of a reference page and send them. '
            'The reply is the generated HTML/Tailwind code.\n\n'
            '### Code replies\n'
            '**Code** shows the raw code, **Preview** a text rendering of the page, '
            '**Copy Code** puts the code on the clipboard.'
        )
        self.push_screen(HelpModal(intro, self.BINDINGS, extra_keys=[('Enter', 'Send from the message box')]))

    def action_quit_app(self) -> None:
        self.exit()
