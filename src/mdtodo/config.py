"""Configuration: where lists live and which list is the default."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import yaml

from .errors import ConfigError
from .models import (
    DEFAULT_GENERAL_LIST,
    DEFAULT_MAIN_DIR,
    LIST_SUFFIX,
    LOCAL_LIST_FILE,
)
from .storage import ensure_dir_exists, get_available_lists

logger = logging.getLogger(__name__)


@dataclass
class ListMetadata:
    """A named list and the file backing it."""

    name: str
    path: str

    def __str__(self) -> str:
        return f"{self.name}: {self.path}"


@dataclass
class Config:
    """User configuration.

    main_dir holds every list created by name. Lists kept elsewhere on disk
    are registered in `lists`. general_list is used when no list is named
    and the working directory has no todo.md.
    """

    main_dir: str
    lists: List[ListMetadata] = field(default_factory=list)
    general_list: str = DEFAULT_GENERAL_LIST

    def list_path(self, name: str) -> str:
        for meta in self.lists:
            if meta.name == name:
                return meta.path
        return os.path.join(self.main_dir, f"{name}{LIST_SUFFIX}")

    def resolve(self, name: Optional[str], cwd: str) -> Tuple[str, str]:
        """Pick the (name, path) a command should act on."""
        if name:
            return name, self.list_path(name)
        local = os.path.join(cwd, LOCAL_LIST_FILE)
        if os.path.isfile(local):
            logger.debug("Using list in working directory: %s", local)
            return LOCAL_LIST_FILE, local
        return self.general_list, self.list_path(self.general_list)

    def outside_list_exists(self, name: str) -> bool:
        return any(meta.name == name for meta in self.lists)

    def existing_lists(self) -> List[ListMetadata]:
        """Linked lists first, then the lists stored in main_dir."""
        found = list(self.lists)
        for name in get_available_lists(self.main_dir):
            if not self.outside_list_exists(name):
                found.append(ListMetadata(name, self.list_path(name)))
        return found

    def add_list(self, name: str, path: str) -> ListMetadata:
        """Register (or re-point) a list that lives outside main_dir."""
        meta = ListMetadata(name, os.path.abspath(os.path.expanduser(path)))
        self.lists = [m for m in self.lists if m.name != name]
        self.lists.append(meta)
        return meta

    def to_dict(self) -> dict:
        return {
            "main_dir": self.main_dir,
            "general_list": self.general_list,
            "lists": [{"name": m.name, "path": m.path} for m in self.lists],
        }

    def save(self, path: str) -> None:
        try:
            ensure_dir_exists(os.path.dirname(os.path.abspath(path)))
            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(path, e.strerror or str(e), action="write") from e
        logger.debug("Saved config to %s", path)


def load_config(path: str) -> Config:
    """Read the config file, raising ConfigError if it is missing or invalid."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigError(path, "not valid UTF-8 text") from e
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a mapping at the top level")
    main_dir = data.get("main_dir")
    if not isinstance(main_dir, str) or not main_dir:
        raise ConfigError(path, "'main_dir' must be set")

    lists = []
    for entry in data.get("lists") or []:
        if not isinstance(entry, dict) or "name" not in entry or "path" not in entry:
            raise ConfigError(path, f"invalid list entry: {entry!r}")
        lists.append(ListMetadata(str(entry["name"]), os.path.expanduser(str(entry["path"]))))

    general_list = data.get("general_list") or DEFAULT_GENERAL_LIST
    return Config(
        main_dir=os.path.expanduser(main_dir),
        lists=lists,
        general_list=str(general_list),
    )


def write_default_config(path: str, main_dir: str = DEFAULT_MAIN_DIR) -> Config:
    """Write a config with default settings and return it."""
    config = Config(main_dir=main_dir)
    config.save(path)
    return load_config(path)
