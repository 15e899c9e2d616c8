"""Output path resolution and file writes for ``save_file``."""

import logging
import os
from datetime import datetime, timezone
from typing import Optional, Union

from .config import Settings

logger = logging.getLogger(__name__)


def _home_dir() -> str:
    return os.path.expanduser("~")


def default_output_dir(settings: Settings) -> str:
    """Configured directory if absolute and present, else ~/Desktop, else home."""
    configured = settings.output_dir
    if configured and os.path.isabs(configured) and os.path.isdir(configured):
        return configured
    desktop = os.path.join(_home_dir(), "Desktop")
    if os.path.isdir(desktop):
        return desktop
    return _home_dir()


def generate_filename(extension: str, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now(timezone.utc)).strftime("%Y%m%d%H%M%S")
    if extension.startswith("."):
        extension = extension[1:]
    return f"chart_{stamp}.{extension or 'png'}"


def resolve_output_path(output_path: Optional[str], fmt: str, settings: Settings) -> str:
    if output_path and os.path.isabs(output_path):
        return output_path
    directory = default_output_dir(settings)
    if output_path:
        return os.path.join(directory, output_path)
    return os.path.join(directory, generate_filename(fmt))


def write_output(path: str, data: Union[bytes, str]) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if isinstance(data, str):
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(data)
    else:
        with open(path, "wb") as handle:
            handle.write(data)
    logger.info("Saved %s (%d %s)", path, len(data), "chars" if isinstance(data, str) else "bytes")
    return path
