from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from .logger import get_logger

log = get_logger(__name__)

STYLESHEET_SUFFIX = ".css"
CONVENTIONAL_NAMES: Sequence[str] = ("codicon.css", "index.css", "styles.css", "main.css")


def resolve_stylesheet_path(input_path: Union[str, Path]) -> Optional[Path]:
    """Locate the stylesheet for a file or directory path.

    A file is accepted only when it has the stylesheet suffix. For a
    directory the conventional names are tried in order, then the first
    ``.css`` file in listing order. Filesystem errors yield ``None``.
    """

    path = Path(input_path)
    try:
        if path.is_file():
            return path if path.suffix == STYLESHEET_SUFFIX else None

        if path.is_dir():
            for name in CONVENTIONAL_NAMES:
                candidate = path / name
                if candidate.is_file():
                    return candidate

            stylesheets = sorted(
                p for p in path.iterdir() if p.suffix == STYLESHEET_SUFFIX and p.is_file()
            )
            if stylesheets:
                log.debug("No conventional stylesheet in %s, using %s", path, stylesheets[0].name)
                return stylesheets[0]
    except OSError as exc:
        log.debug("Error probing %s for a stylesheet: %s", path, exc)
        return None

    log.debug("No stylesheet found at %s", path)
    return None
