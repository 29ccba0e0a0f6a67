from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "UNIDIC_DIR_ENV",
    "get_unidic_dicdir",
]

UNIDIC_DIR_ENV = "KANASLUG_UNIDIC_DIR"


def _has_dicrc(path: Path) -> bool:
    return (path / "dicrc").is_file()


def get_unidic_dicdir() -> Path | None:
    """
    Return a full UniDic directory if one is available: ``KANASLUG_UNIDIC_DIR``
    first, then the ``unidic`` package. ``None`` leaves the choice to fugashi,
    which picks up ``unidic-lite``.
    """
    env_dir = os.environ.get(UNIDIC_DIR_ENV)
    if env_dir:
        candidate = Path(env_dir).expanduser()
        if _has_dicrc(candidate):
            return candidate
    try:
        import unidic  # type: ignore
    except ImportError:
        return None
    dicdir = getattr(unidic, "DICDIR", "")
    if dicdir and _has_dicrc(Path(dicdir)):
        return Path(dicdir)
    return None
