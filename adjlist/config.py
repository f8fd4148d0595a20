"""Configuration file parser."""

import logging
import os.path
from abc import ABC, abstractproperty
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")

CONFIG_NAME = "adjlist.yml"


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override abstract properties "required" and "optional".

    Example usage:

        # Assuming MyConfig is a subclass of Config:
        cfg = MyConfig.load(Path("/path/to/config.yml"))
        cfg.validate()

    Note that the creator must call validate(). They can optionally pass extra
    defaults as keyword arguments. Keys whose value has a different type than
    their default are reported and replaced by the default.
    """

    def __init__(self, path: Optional[Path], data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @abstractproperty
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @abstractproperty
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Validate the loaded configuration.

        This must be called manually after creating an instance.

        Extra defaults can be passed for keys as keyword arguments. They will
        override the defaults from the "required" and "optional" properties.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        known = {**self.required, **self.optional, **defaults}
        data = dict(self.data)
        for key, val in self.data.items():
            if key not in known:
                logging.warning("%s: unknown key %r", self.path, key)
            elif known[key] is not None and not isinstance(val, type(known[key])):
                logging.error(
                    "%s: %r should be %s, not %s",
                    self.path,
                    key,
                    type(known[key]).__name__,
                    type(val).__name__,
                )
                del data[key]
        self.data = {**known, **data}

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Optional[Path], content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Optional[Path], content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


class SessionConfig(Config):

    """Defaults for a graph session, read from adjlist.yml.

    Command-line flags take precedence over these values.
    """

    required: Dict[str, Any] = {}

    optional = {
        "directed": False,
        "weighted": False,
        "prompt": "> ",
    }

    @staticmethod
    def find(start: Optional[Path] = None) -> "SessionConfig":
        """Load the nearest adjlist.yml, or the defaults if there is none."""
        path = find_config(start)
        if path is None:
            cfg = SessionConfig(None, {})
        else:
            logging.info("found config %s", path)
            cfg = SessionConfig.load(path)
        cfg.validate()
        logging.debug("session config: %r", cfg)
        return cfg


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """Search start (default: the cwd) and its parents for adjlist.yml."""
    cwd = Path.cwd()
    path = (start or cwd).resolve()
    while True:
        config = path / CONFIG_NAME
        if config.exists() and config.is_file():
            # Relative path keeps log messages short. Path.relative_to does not
            # go up directories, so use os.path.relpath.
            return Path(os.path.relpath(config, cwd))
        if path == path.parent:
            return None
        path = path.parent
