from __future__ import annotations

import os
from pathlib import Path

from typedefender.assets.registry import GameAssets
from typedefender.assets.singleton import init_assets


def default_project_root() -> Path:
    # typedefender/assets/startup.py -> project root holds assets/
    override = os.environ.get("TYPEDEFENDER_ASSET_ROOT")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[2]


def init_assets_for_app() -> GameAssets:
    return init_assets(project_root=default_project_root())
