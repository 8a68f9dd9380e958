"""
Resolve Command

Runs one resolution pass and writes the embeddable stylesheet and the icon
catalog, or prints a summary when no output directory is given.
"""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path

from ...core.config import InspectorConfig
from ...core.logger import get_logger
from ...core.resolver import IconInspector

log = get_logger(__name__)

STYLESHEET_NAME = "codicon.css"
CATALOG_NAME = "icons.json"


def run(args: Namespace) -> None:
    """
    Run resolve command.

    Args:
        args: Parsed command-line arguments
    """
    config = InspectorConfig(Path(args.config) if args.config else None)
    inspector = IconInspector(
        lambda: config.load_with(local_path=args.path, embed=args.embed)
    )
    resolution = inspector.refresh()

    if not args.out:
        print(f"Source: {resolution.display_label}")
        if resolution.stylesheet_path:
            print(f"Stylesheet: {resolution.stylesheet_path}")
        print(f"Icons: {len(resolution.catalog)}")
        for note in resolution.notes:
            print(f"  fallback: {note}")
        return

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / STYLESHEET_NAME).write_text(resolution.stylesheet, encoding="utf-8")
    payload = json.dumps(resolution.to_dict(), indent=2 if args.pretty else None)
    (out_dir / CATALOG_NAME).write_text(payload, encoding="utf-8")
    log.info(
        "✓ Wrote %s icons (%s) to %s",
        len(resolution.catalog),
        resolution.display_label,
        out_dir,
    )
