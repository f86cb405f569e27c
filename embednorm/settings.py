"""Persisted plugin settings.

Responsibilities:
- Define the settings record and its defaults.
- Merge stored values over defaults explicitly, key by key.
- Load and save settings as YAML on disk.

Key types:
- `NormalizerSettings`: the persisted settings record.
- `SettingsStore`: YAML file persistence for `NormalizerSettings`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import typer
import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean


SETTINGS_PATH_ENV = "EMBEDNORM_SETTINGS_PATH"
_APP_NAME = "embednorm"
_SETTINGS_FILE_NAME = "settings.yaml"


@dataclass(slots=True)
class NormalizerSettings:
    """Settings record for the embed normalizer plugin.

    Attributes:
        copy_to_clipboard: Copy normalized text to the clipboard instead of
            writing it back into the editor.
    """

    copy_to_clipboard: bool = True


DEFAULT_SETTINGS = NormalizerSettings()

_SUPPORTED_KEYS = frozenset(asdict(DEFAULT_SETTINGS))


def merge_defaults(
    stored: Mapping[str, Any] | None,
    defaults: NormalizerSettings = DEFAULT_SETTINGS,
    source_label: str = "Stored settings",
) -> NormalizerSettings:
    """Merge stored settings values over defaults.

    Missing keys and `None` values keep the default. Unknown keys and values
    that are not booleans raise `ValueError`.
    """

    if stored is None:
        return NormalizerSettings(copy_to_clipboard=defaults.copy_to_clipboard)
    if not isinstance(stored, Mapping):
        raise ValueError(f"{source_label} must be a mapping/object.")

    unknown = sorted(str(key) for key in set(stored).difference(_SUPPORTED_KEYS))
    if unknown:
        key_list = ", ".join(unknown)
        raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    copy_to_clipboard = defaults.copy_to_clipboard
    raw_value = stored.get("copy_to_clipboard")
    if raw_value is not None:
        parsed = parse_permissive_boolean(raw_value)
        if parsed is None:
            raise ValueError(
                f"{source_label} field `copy_to_clipboard` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        copy_to_clipboard = parsed

    return NormalizerSettings(copy_to_clipboard=copy_to_clipboard)


def resolve_settings_path(
    explicit: Path | None = None, env: Mapping[str, str] | None = None
) -> Path:
    """Resolve the settings file path.

    Precedence is explicit path > `EMBEDNORM_SETTINGS_PATH` > per-user app dir.
    """

    if explicit is not None:
        return explicit
    source = env if env is not None else os.environ
    from_env = normalize_optional_string(source.get(SETTINGS_PATH_ENV))
    if from_env is not None:
        return Path(from_env)
    return Path(typer.get_app_dir(_APP_NAME)) / _SETTINGS_FILE_NAME


class SettingsStore:
    """YAML-backed settings persistence."""

    def __init__(self, path: Path) -> None:
        """Initialize the store with the settings file path."""

        self.path = path

    def load(self) -> NormalizerSettings:
        """Load settings merged over defaults; a missing file yields defaults."""

        if not self.path.exists():
            return merge_defaults(None)

        raw_text = self.path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Settings file `{self.path}` is not valid YAML: {exc}") from exc
        return merge_defaults(payload, source_label=f"Settings file `{self.path}`")

    def save(self, settings: NormalizerSettings) -> Path:
        """Persist settings and return the written path."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            yaml.safe_dump(asdict(settings), sort_keys=True),
            encoding="utf-8",
        )
        return self.path
