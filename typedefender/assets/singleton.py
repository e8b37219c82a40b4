from __future__ import annotations

import logging
from pathlib import Path

from typedefender.assets.registry import GameAssets, load_game_assets

logger = logging.getLogger(__name__)

_ASSETS: GameAssets | None = None
_ASSETS_ROOT: Path | None = None


def init_assets(*, project_root: Path) -> GameAssets:
    """Load the word lists once per process.

    Repeated calls with the same root return the cached instance; a different
    root is a programming error (tests reset first).
    """

    global _ASSETS, _ASSETS_ROOT
    root = project_root.resolve()
    if _ASSETS is not None:
        if root != _ASSETS_ROOT:
            raise RuntimeError(f"Assets already initialized from {_ASSETS_ROOT}, not {root}")
        return _ASSETS

    _ASSETS = load_game_assets(root=root)
    _ASSETS_ROOT = root
    logger.info(
        "word lists loaded from %s: %s",
        root,
        ", ".join(f"{lang.value}={len(wl)}" for lang, wl in _ASSETS.word_lists.items()),
    )
    return _ASSETS


def reset_assets_for_tests() -> None:
    global _ASSETS, _ASSETS_ROOT
    _ASSETS = None
    _ASSETS_ROOT = None


def get_assets() -> GameAssets:
    if _ASSETS is None:
        raise RuntimeError("Assets not initialized. Call init_assets() at startup.")
    return _ASSETS
