"""Port: staged image to data URL conversion."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ImageEncoder(Protocol):
    """Reads one image into a base64 data URL. Raises ImageConversionError on failure."""

    async def to_data_url(self, path: Path) -> str: ...
