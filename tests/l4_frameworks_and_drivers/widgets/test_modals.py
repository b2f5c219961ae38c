"""Tests for the attach and help modals."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from screen_to_code.l4_frameworks_and_drivers.widgets.attach_modal import AttachModal, parse_paths
from screen_to_code.l4_frameworks_and_drivers.widgets.help_modal import HelpModal, key_label, keybinding_table


class TestParsePaths:
    def test_whitespace_and_commas(self):
        assert parse_paths('a.png b.png,c.png') == ['a.png', 'b.png', 'c.png']

    def test_quoted_path_with_space(self):
        assert parse_paths('"about page.png" home.png') == ['about page.png', 'home.png']

    def test_unbalanced_quote_falls_back(self):
        assert parse_paths('"a.png b.png') == ['a.png', 'b.png']

    def test_blank(self):
        assert parse_paths('   ') == []


class ModalHost(App[None]):
    """Minimal app to host modals for testing."""

    def __init__(self) -> None:
        super().__init__()
        self.results: list[list[str] | None] = []

    def compose(self) -> ComposeResult:
        yield Static('host')


class TestAttachModal:
    @pytest.mark.asyncio
    async def test_title_shows_remaining(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            modal = AttachModal(remaining=3)
            app.push_screen(modal)
            await pilot.pause()
            assert '3 slot(s) left' in str(modal.query_one('#attach-title', Static).content)

    @pytest.mark.asyncio
    async def test_submit_returns_paths(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            modal = AttachModal(remaining=5)
            app.push_screen(modal, callback=app.results.append)
            await pilot.pause()
            field = modal.query_one('#attach-input', Input)
            field.value = 'a.png, b.png'
            field.focus()
            await pilot.press('enter')
            await pilot.pause()
            assert app.results == [['a.png', 'b.png']]

    @pytest.mark.asyncio
    async def test_empty_submit_returns_none(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            modal = AttachModal(remaining=5)
            app.push_screen(modal, callback=app.results.append)
            await pilot.pause()
            modal.query_one('#attach-input', Input).focus()
            await pilot.press('enter')
            await pilot.pause()
            assert app.results == [None]

    @pytest.mark.asyncio
    async def test_escape_cancels(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            app.push_screen(AttachModal(remaining=5), callback=app.results.append)
            await pilot.pause()
            await pilot.press('escape')
            await pilot.pause()
            assert app.results == [None]
            assert not isinstance(app.screen, AttachModal)


class TestHelpModal:
    @pytest.mark.asyncio
    async def test_escape_dismisses(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            app.push_screen(HelpModal('### Usage', [Binding('f1', 'show_help', 'Toggle this help')]))
            await pilot.pause()
            assert isinstance(app.screen, HelpModal)
            assert 'Escape' in str(app.screen.query_one('#help-hint', Static).content)
            await pilot.press('escape')
            await pilot.pause()
            assert not isinstance(app.screen, HelpModal)

    @pytest.mark.asyncio
    async def test_body_lists_bindings_after_intro(self):
        app = ModalHost()
        async with app.run_test() as pilot:
            modal = HelpModal(
                '### Usage\nAttach, then send.',
                [Binding('ctrl+o', 'attach', 'Attach screenshots by path')],
                extra_keys=[('Enter', 'Send from the message box')],
            )
            app.push_screen(modal)
            await pilot.pause()
            assert modal.body_md.startswith('### Usage\nAttach, then send.')
            assert '### Keybindings' in modal.body_md
            assert '| `ctrl+o` | Attach screenshots by path |' in modal.body_md
            assert modal.body_md.endswith('| `Enter` | Send from the message box |')


class TestKeybindingTable:
    def test_rows_follow_binding_order(self):
        table = keybinding_table(
            [Binding('ctrl+s', 'send', 'Send'), Binding('tab', 'focus_next', 'Switch focus', show=False)]
        )
        assert table.splitlines() == [
            '| Key | Action |',
            '|-----|--------|',
            '| `ctrl+s` | Send |',
            '| `Tab` | Switch focus |',
        ]

    @pytest.mark.parametrize(
        ('key', 'label'),
        [('ctrl+q', 'ctrl+q'), ('f1', 'F1'), ('f12', 'F12'), ('tab', 'Tab'), ('escape', 'Escape')],
    )
    def test_key_label(self, key, label):
        assert key_label(key) == label
