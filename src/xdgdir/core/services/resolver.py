"""XDG base directory resolution.

Variables are checked in a fixed order and the first invalid one aborts
resolution:

    HOME, XDG_CONFIG_HOME, XDG_DATA_HOME, XDG_STATE_HOME, XDG_CACHE_HOME,
    XDG_RUNTIME_DIR

An unset variable and one set to the empty string are treated the same. A
value made only of whitespace is not empty and is validated like any other.
Nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from xdgdir.core.domain.entities import BaseDir
from xdgdir.core.services.environment import EnvironmentSource, ProcessEnvironment
from xdgdir.core.services.error_codes import HomeNotSet, NotAbsolutePath

HOME_VAR = "HOME"
RUNTIME_VAR = "XDG_RUNTIME_DIR"

# (field, variable, default relative to $HOME), in validation order.
OVERRIDABLE_DIRS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    ("config", "XDG_CONFIG_HOME", (".config",)),
    ("data", "XDG_DATA_HOME", (".local", "share")),
    ("state", "XDG_STATE_HOME", (".local", "state")),
    ("cache", "XDG_CACHE_HOME", (".cache",)),
)

BIN_SUBPATH = (".local", "bin")

CHECK_ORDER: Tuple[str, ...] = (HOME_VAR, *(var for _, var, _ in OVERRIDABLE_DIRS), RUNTIME_VAR)


def _lookup(env: EnvironmentSource, name: str) -> Optional[str]:
    value = env.lookup(name)
    return value if value else None


def _ensure_absolute(name: str, value: str) -> Path:
    path = Path(value)
    if not path.is_absolute():
        raise NotAbsolutePath(name, value)
    return path


def _home(env: EnvironmentSource) -> Path:
    value = _lookup(env, HOME_VAR)
    if value is None:
        raise HomeNotSet()
    return _ensure_absolute(HOME_VAR, value)


def resolve_global(env: Optional[EnvironmentSource] = None) -> BaseDir:
    """Resolve the global, non-application-specific base directories.

    Args:
        env: Where to read variables from. Defaults to the process environment.

    Returns:
        The resolved BaseDir, e.g. ``config=~/.config``.

    Raises:
        HomeNotSet: ``$HOME`` is unset or empty.
        NotAbsolutePath: the first variable, in check order, holding a
            relative path.
    """
    if env is None:
        env = ProcessEnvironment()

    home = _home(env)
    dirs: Dict[str, Optional[Path]] = {"home": home, "bin": home.joinpath(*BIN_SUBPATH)}

    for field_name, var, default in OVERRIDABLE_DIRS:
        value = _lookup(env, var)
        dirs[field_name] = home.joinpath(*default) if value is None else _ensure_absolute(var, value)

    runtime = _lookup(env, RUNTIME_VAR)
    dirs["runtime"] = None if runtime is None else _ensure_absolute(RUNTIME_VAR, runtime)

    return BaseDir(**dirs)


def resolve_for_app(app_name: str, env: Optional[EnvironmentSource] = None) -> BaseDir:
    """Resolve base directories for ``app_name``.

    Wraps ``resolve_global`` and appends ``app_name`` to ``config``, ``data``,
    ``state``, ``cache`` and, when set, ``runtime``. Raises the same errors.
    """
    return resolve_global(env).for_app(app_name)
