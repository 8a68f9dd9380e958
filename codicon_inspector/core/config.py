from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .logger import get_logger

log = get_logger(__name__)

ENV_LOCAL_PATH = "CODICON_LOCAL_PATH"
ENV_BUNDLED_CSS = "CODICON_BUNDLED_CSS"
ENV_EMBED = "CODICON_EMBED"


class InspectorConfigModel(BaseModel):
    # Empty string means "use the bundled stylesheet"
    local_codicons_path: str = ""
    bundled_css_path: Optional[str] = None
    embed: Literal["file", "data"] = "file"
    prefix: str = Field("codicon", min_length=1)

    @property
    def local_path(self) -> Optional[Path]:
        value = self.local_codicons_path.strip()
        return Path(value).expanduser() if value else None


class InspectorConfig:
    """Loads :class:`InspectorConfigModel` from an optional JSON file plus env overrides."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self.model: Optional[InspectorConfigModel] = None

    def load(self) -> InspectorConfigModel:
        data = self._read_file()
        data.update(self._env_overrides())
        try:
            self.model = InspectorConfigModel.model_validate(data)
        except ValidationError as exc:
            log.warning("Invalid configuration, using defaults: %s", exc)
            self.model = InspectorConfigModel()
        return self.model

    def _read_file(self) -> dict:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            log.warning(f"Could not read config {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            log.warning(f"Config {self.path} is not a JSON object, ignoring it")
            return {}
        return data

    def load_with(
        self,
        *,
        local_path: Optional[str] = None,
        embed: Optional[str] = None,
    ) -> InspectorConfigModel:
        """Load, then apply explicit (command-line) overrides on top."""
        model = self.load()
        updates = {}
        if local_path is not None:
            updates["local_codicons_path"] = local_path
        if embed is not None:
            updates["embed"] = embed
        if updates:
            self.model = model.model_copy(update=updates)
        return self.model

    @staticmethod
    def _env_overrides() -> dict:
        overrides = {}
        if ENV_LOCAL_PATH in os.environ:
            overrides["local_codicons_path"] = os.environ[ENV_LOCAL_PATH]
        if os.environ.get(ENV_BUNDLED_CSS):
            overrides["bundled_css_path"] = os.environ[ENV_BUNDLED_CSS]
        if os.environ.get(ENV_EMBED):
            overrides["embed"] = os.environ[ENV_EMBED]
        if overrides:
            log.debug(f"Config overrides from environment: {sorted(overrides)}")
        return overrides
