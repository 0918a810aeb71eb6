from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class BaseDir:
    """Resolved XDG base directories, either global or for one application."""

    home: Path
    config: Path
    data: Path
    state: Path
    cache: Path
    bin: Path
    runtime: Optional[Path] = None

    def for_app(self, app_name: str) -> "BaseDir":
        """Return a new BaseDir with ``app_name`` appended to the per-app fields.

        ``home`` and ``bin`` are shared by every application and stay as they are.
        """
        return replace(
            self,
            config=self.config / app_name,
            data=self.data / app_name,
            state=self.state / app_name,
            cache=self.cache / app_name,
            runtime=self.runtime / app_name if self.runtime is not None else None,
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Textual form of every field, in display order. ``runtime`` may be None."""
        values = asdict(self)
        return {
            key: (str(values[key]) if values[key] is not None else None)
            for key in FIELD_ORDER
        }


FIELD_ORDER = ("home", "config", "data", "state", "cache", "bin", "runtime")
