"""Staged images row — one chip per staged image with a remove button."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from textual.containers import Horizontal
from textual.widgets import Button, Static

from screen_to_code.l4_frameworks_and_drivers.messages import RemoveImageRequested


class StagedImagesBar(Horizontal):
    """Mirrors the controller's staged images. Remove buttons post RemoveImageRequested."""

    DEFAULT_CSS = """
    StagedImagesBar {
        height: auto;
        min-height: 1;
        padding: 0 1;
    }
    StagedImagesBar > .staged-name {
        width: auto;
        padding: 1 0 0 1;
    }
    StagedImagesBar > .remove-image {
        min-width: 5;
        margin-right: 2;
    }
    StagedImagesBar > #staged-empty {
        color: $text-muted;
    }
    """

    async def update_images(self, paths: Sequence[Path]) -> None:
        await self.remove_children()
        if not paths:
            await self.mount(Static('No images staged — ctrl+o to attach', id='staged-empty'))
            return
        widgets = []
        for i, path in enumerate(paths):
            widgets.append(Static(path.name, classes='staged-name', markup=False))
            widgets.append(Button('×', name=str(i), classes='remove-image', variant='error'))
        await self.mount_all(widgets)

    def on_mount(self) -> None:
        self.mount(Static('No images staged — ctrl+o to attach', id='staged-empty'))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class('remove-image') and event.button.name is not None:
            event.stop()
            self.post_message(RemoveImageRequested(int(event.button.name)))
