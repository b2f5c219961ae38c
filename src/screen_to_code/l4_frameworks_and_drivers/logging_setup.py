"""Debug logging setup — file-based for the TUI, stderr for the proxy server."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_file_logging(log_dir: Path) -> Path:
    """Configure file-based debug logging so the TUI keeps the terminal clean."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'stc_debug.log'
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger('stc')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    logging.getLogger('stc.app').info('Debug logging started → %s', log_path)
    return log_path


def setup_stream_logging(level: int = logging.INFO) -> None:
    """Configure stderr logging for the proxy server process."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger('stc')
    root.setLevel(level)
    root.addHandler(handler)
