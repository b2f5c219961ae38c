"""Gateway: local image files to base64 data URLs — implements ImageEncoder port."""

from __future__ import annotations

import asyncio
import base64
import mimetypes
from pathlib import Path

from screen_to_code.l1_entities.errors import ImageConversionError


class FileImageEncoder:
    """Reads file bytes off the event loop and inlines them as ``data:<mime>;base64,...``."""

    async def to_data_url(self, path: Path) -> str:
        try:
            data = await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            raise ImageConversionError(f'Cannot read image {path}: {e}') from e
        mime = mimetypes.guess_type(Path(path).name)[0] or 'application/octet-stream'
        encoded = base64.b64encode(data).decode('ascii')
        return f'data:{mime};base64,{encoded}'
