"""Application configuration stored as YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

_APP_DIR = ".kubebrowse"
_CONFIG_FILE = "config.yaml"


class ConfigError(Exception):
    """Raised when the configuration cannot be read, written or parsed.

    ``serialization`` is ``True`` when the file content could not be
    (de)serialized and ``False`` when the file itself could not be accessed.
    """

    def __init__(self, message: str, *, serialization: bool) -> None:
        super().__init__(message)
        self.serialization = serialization


def default_config_path() -> Path:
    """Return the default configuration file location: ``HOME/.kubebrowse/config.yaml``."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return Path(_CONFIG_FILE)
    return home / _APP_DIR / _CONFIG_FILE


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ConfigError(f"field '{key}' must be a string", serialization=True)
    return value


@dataclass
class ContextInfo:
    """Remembered kind and namespace for a kube context."""

    name: str
    namespace: str = ""
    kind: str = ""

    def update(self, kind: str | None, namespace: str | None) -> None:
        """Update ``kind`` and/or ``namespace`` where a value is given."""
        if namespace is not None:
            self.namespace = namespace
        if kind is not None:
            self.kind = kind

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "namespace": self.namespace, "kind": self.kind}

    @classmethod
    def from_dict(cls, data: Any) -> "ContextInfo":
        if not isinstance(data, dict):
            raise ConfigError("context entry must be a mapping", serialization=True)
        return cls(
            name=_require_str(data, "name"),
            namespace=_require_str(data, "namespace"),
            kind=_require_str(data, "kind"),
        )


@dataclass
class Config:
    """Application configuration."""

    current_context: str | None = None
    contexts: list[ContextInfo] = field(default_factory=list)
    theme: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as plain data ready for YAML."""
        data: dict[str, Any] = {
            "current_context": self.current_context,
            "contexts": [context.to_dict() for context in self.contexts],
        }
        if self.theme is not None:
            data["theme"] = self.theme
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a configuration from plain data, raising :class:`ConfigError` if malformed."""
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping", serialization=True)
        current = data.get("current_context")
        if current is not None and not isinstance(current, str):
            raise ConfigError("field 'current_context' must be a string", serialization=True)
        contexts = data.get("contexts")
        if not isinstance(contexts, list):
            raise ConfigError("field 'contexts' must be a list", serialization=True)
        return cls(
            current_context=current,
            contexts=[ContextInfo.from_dict(entry) for entry in contexts],
            theme=data.get("theme"),
        )

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Config":
        """Load the configuration from ``path`` (the default location if omitted)."""
        target = Path(path) if path is not None else default_config_path()
        try:
            text = target.read_text(encoding="utf-8")
        except OSError as error:
            raise ConfigError("cannot read/write configuration file", serialization=False) from error
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as error:
            raise ConfigError("cannot serialize/deserialize configuration", serialization=True) from error
        return cls.from_dict(data)

    @classmethod
    def load_or_create(cls, path: str | Path | None = None) -> "Config":
        """Load the configuration, or create a default one if the file cannot be read.

        A file with malformed content yields a default configuration without
        overwriting it.
        """
        try:
            return cls.load(path)
        except ConfigError as error:
            if error.serialization:
                return cls()
        config = cls()
        config.save(path)
        return config

    def save(self, path: str | Path | None = None) -> None:
        """Write the configuration to ``path`` (the default location if omitted)."""
        target = Path(path) if path is not None else default_config_path()
        try:
            text = yaml.safe_dump(self.to_dict(), sort_keys=False)
        except yaml.YAMLError as error:
            raise ConfigError("cannot serialize/deserialize configuration", serialization=True) from error
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as error:
            raise ConfigError("cannot read/write configuration file", serialization=False) from error

    def context_index(self, context: str) -> int | None:
        """Return the index of the named context, if present."""
        return next((i for i, info in enumerate(self.contexts) if info.name == context), None)

    def _context(self, context: str) -> ContextInfo | None:
        index = self.context_index(context)
        return self.contexts[index] if index is not None else None

    def get_kind(self, context: str) -> str | None:
        """Return the kind stored for the named context."""
        info = self._context(context)
        return info.kind if info is not None else None

    def get_namespace(self, context: str) -> str | None:
        """Return the namespace stored for the named context."""
        info = self._context(context)
        return info.namespace if info is not None else None