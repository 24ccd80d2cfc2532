"""JSON file storage for the dashboard settings."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path

from pydantic import ValidationError

from sonarpick.config.dashboard import (
    TEMPLATE_CONFIG_FILENAME,
    DashboardSettings,
    get_config_path,
)
from sonarpick.config.errors import ConfigurationError

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class JsonConfigStore:
    """Reads and writes ``config.json``.

    Writes go to a temporary file next to the target which then replaces it, so the
    file on disk always holds either the previous or the new settings.
    """

    path: Path

    def load(self) -> DashboardSettings:
        try:
            raw = self.path.read_text(encoding="utf-8")
            document = json.loads(raw)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(
                f'Could not read the configuration file "{self.path}": {exc}. '
                "Make sure it exists and contains valid JSON; "
                f'"{TEMPLATE_CONFIG_FILENAME}" can be used as a starting point.'
            ) from exc

        if not isinstance(document, dict):
            raise ConfigurationError(f'"{self.path}" must contain a JSON object')

        try:
            return DashboardSettings.model_validate(document)
        except ValidationError as exc:
            raise ConfigurationError(f'Invalid settings in "{self.path}": {exc}') from exc

    def save(self, settings: DashboardSettings) -> None:
        content = json.dumps(settings.to_document(), indent=2, ensure_ascii=False) + "\n"
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as exc:
            raise ConfigurationError(
                f'Could not save the configuration file "{self.path}": {exc}'
            ) from exc
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            if self.path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise ConfigurationError(
                f'Could not save the configuration file "{self.path}": {exc}'
            ) from exc
        log.info('Configuration saved to "%s"', self.path)


def load_dashboard_config(path: str | os.PathLike[str] | None = None) -> DashboardSettings:
    return JsonConfigStore(get_config_path(path)).load()
