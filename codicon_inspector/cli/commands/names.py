from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from ...core.config import InspectorConfig
from ...core.resolver import IconInspector


def run(args: Namespace) -> None:
    config = InspectorConfig(Path(args.config) if args.config else None)
    resolution = IconInspector(lambda: config.load_with(local_path=args.path)).refresh()
    names = resolution.catalog.search(args.search) if args.search else resolution.icon_names
    for name in names:
        print(name)
