"""
Resolution Orchestrator

Turns the configured local path into a :class:`Resolution`. The sources are
tried as an ordered chain of fallible steps:

1. local    - locate, read, rewrite fonts and urls, extract names
2. bundled  - the stylesheet shipped with the package, its font inlined as a
              data: URI
3. minimal  - a built-in rule, whose extraction yields the fallback catalog

Steps 1 and 2 signal failure by raising :class:`AssetResolutionError`; the
runner records the reason on the result and moves on. The minimal rule
closes the chain.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import InspectorConfig, InspectorConfigModel
from .errors import AssetResolutionError, PathNotFound, ReadFailure
from .font_rewriter import rewrite_font_format
from .icon_names import extract_icon_names
from .logger import get_logger
from .models import AssetSource, Resolution, StylesheetDocument
from .path_locator import resolve_stylesheet_path
from .url_resolver import data_uri_linker, get_linker, rewrite_urls

log = get_logger(__name__)

BUNDLED_CSS_PATH = Path(__file__).resolve().parent.parent / "assets" / "codicon.css"

MINIMAL_CSS = """
.codicon {
    font-family: "codicon";
    font-size: inherit;
    font-style: normal;
    font-variant: normal;
    font-weight: normal;
    line-height: 1;
    text-decoration: none;
    text-rendering: auto;
    text-transform: none;
    -webkit-font-smoothing: antialiased;
    -moz-osx-font-smoothing: grayscale;
    user-select: none;
    -webkit-user-select: none;
    -ms-user-select: none;
}
"""


def resource_roots(local_path: Optional[Path]) -> List[Path]:
    """Directories a sandboxed renderer must be allowed to read for ``local_path``.

    For a directory: itself and its parent. For a file: its directory and
    that directory's parent. Nothing when the path does not exist.
    """
    if local_path is None:
        return []
    try:
        if not local_path.exists():
            return []
        base = local_path if local_path.is_dir() else local_path.parent
    except OSError:
        return []
    base = base.resolve()
    roots = [base]
    if base.parent != base:
        roots.append(base.parent)
    return roots


class IconAssetResolver:
    """Runs one resolution pass for a given configuration."""

    def __init__(self, config: InspectorConfigModel):
        self.config = config
        self._notes: List[str] = []

    @property
    def bundled_css_path(self) -> Path:
        if self.config.bundled_css_path:
            return Path(self.config.bundled_css_path).expanduser()
        return BUNDLED_CSS_PATH

    def steps(self) -> Sequence[Callable[[], Resolution]]:
        """Fallible steps for this pass; the local step only runs when configured."""
        chain: List[Callable[[], Resolution]] = []
        if self.config.local_path is not None:
            chain.append(self._resolve_local)
        chain.append(self._resolve_bundled)
        return chain

    def resolve(self) -> Resolution:
        self._notes = []
        for step in self.steps():
            try:
                resolution = step()
            except AssetResolutionError as exc:
                log.warning("%s: %s", type(exc).__name__, exc)
                self._notes.append(f"{type(exc).__name__}: {exc}")
                continue
            return self._finish(resolution)
        return self._finish(self._resolve_minimal())

    def _finish(self, resolution: Resolution) -> Resolution:
        resolution.notes = list(self._notes)
        log.info(
            "Resolved %s icons from %s stylesheet",
            len(resolution.catalog),
            resolution.source.value,
        )
        return resolution

    def _resolve_local(self) -> Resolution:
        local_path = self.config.local_path
        if local_path is None or not local_path.exists():
            raise PathNotFound(f"local codicons path does not exist: {local_path}")

        css_path = resolve_stylesheet_path(local_path)
        if css_path is None:
            raise PathNotFound(f"no CSS file found in: {local_path}")

        document = _read_document(css_path)
        linker = get_linker(self.config.embed)

        rewritten = rewrite_font_format(document.text, document.directory)
        rewritten = rewrite_urls(rewritten, document.path, linker)
        catalog = extract_icon_names(document.text, self.config.prefix)

        return Resolution(
            catalog=catalog,
            stylesheet=rewritten,
            source=AssetSource.LOCAL,
            source_label=local_path.name or str(local_path),
            stylesheet_path=document.path,
            resource_roots=resource_roots(local_path),
        )

    def _resolve_bundled(self) -> Resolution:
        document = _read_document(self.bundled_css_path)
        return Resolution(
            catalog=extract_icon_names(document.text, self.config.prefix),
            stylesheet=rewrite_urls(document.text, document.path, data_uri_linker),
            source=AssetSource.BUNDLED,
            stylesheet_path=document.path,
        )

    def _resolve_minimal(self) -> Resolution:
        log.error("Failed to read bundled codicons CSS, using minimal built-in style")
        return Resolution(
            catalog=extract_icon_names(MINIMAL_CSS, self.config.prefix),
            stylesheet=MINIMAL_CSS,
            source=AssetSource.BUNDLED,
        )


def _read_document(path: Path) -> StylesheetDocument:
    try:
        return StylesheetDocument.read(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailure(f"could not read {path}: {exc}") from exc


def resolve_assets(config: Optional[InspectorConfigModel] = None) -> Resolution:
    """Run a single pass with ``config`` (defaults: bundled stylesheet)."""
    return IconAssetResolver(config or InspectorConfigModel()).resolve()


class IconInspector:
    """Keeps the latest :class:`Resolution` and rebuilds it on ``refresh()``.

    The configuration is re-read from ``config_loader`` at the start of every
    pass, so a changed local path takes effect on the next refresh.
    """

    def __init__(self, config_loader: Optional[Callable[[], InspectorConfigModel]] = None):
        self._config_loader = config_loader or InspectorConfig().load
        self.current: Optional[Resolution] = None

    def refresh(self) -> Resolution:
        config = self._config_loader()
        self.current = IconAssetResolver(config).resolve()
        return self.current
