"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXTENSIONS = (".md", ".markdown", ".txt")
DEFAULT_CATEGORY = "uncategorized"


def _get_default_root() -> Path:
    """Get the default corpus root for the current working directory."""
    # Prefer a local notes/ checkout when running next to one
    local_root = Path("notes")
    if local_root.exists():
        return local_root

    return Path.home() / "Documents" / "DocShelf"


@dataclass(slots=True)
class AppConfig:
    root: Path | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    min_token_length: int = 2
    snippet_chars: int = 160
    default_category: str = DEFAULT_CATEGORY

    def __post_init__(self) -> None:
        if self.root is None:
            self.root = _get_default_root()

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if self.root is None:
            self.root = _get_default_root()
        if Path(self.root).is_absolute() or base_dir is None:
            return Path(self.root)
        return base_dir / self.root
