"""Staged image set entity — the Composer's bounded attachment tray."""

from __future__ import annotations

import mimetypes
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MAX_IMAGES = 5


def is_image_path(path: Path | str) -> bool:
    """True when the file name maps to an ``image/*`` media type."""
    mime, _ = mimetypes.guess_type(Path(path).name)
    return mime is not None and mime.startswith('image/')


class StagedImages(BaseModel):
    """Ordered images waiting to be sent. Never holds more than ``max_images``."""

    paths: list[Path] = Field(default_factory=list)
    max_images: int = DEFAULT_MAX_IMAGES

    @property
    def remaining(self) -> int:
        return max(self.max_images - len(self.paths), 0)

    def attach(self, files: Iterable[Path | str]) -> int:
        """Append image files up to the remaining capacity.

        Non-image files are skipped and excess images dropped silently.
        Returns the number of files accepted.
        """
        images = [Path(f) for f in files if is_image_path(f)]
        accepted = images[: self.remaining]
        self.paths.extend(accepted)
        return len(accepted)

    def remove(self, index: int) -> bool:
        """Remove one image by position. Out-of-range indices leave the set untouched."""
        if not 0 <= index < len(self.paths):
            return False
        del self.paths[index]
        return True

    def clear(self) -> None:
        self.paths.clear()

    def __len__(self) -> int:
        return len(self.paths)
