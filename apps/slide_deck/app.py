#!/usr/bin/env python3
"""Slide deck domain app facade."""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

ROOT = Path(__file__).resolve().parents[2]
ROOT = Path(os.getenv("SLIDE_DECK_ROOT", str(ROOT))).resolve()

import sys
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts.deck_config import DeckConfig, load_config
from scripts.deck_page import load_fragments, render_page
from scripts.deck_server import APIError, content_type, resolve_static


class SlideDeckApp:
    def __init__(self, config: DeckConfig | None = None, root: Path = ROOT):
        self.root = Path(root)
        self.config = config if config is not None else load_config()

    def _config_for(self, params: Dict[str, Any]) -> DeckConfig:
        base_dir = str(params.get("base_dir", "")).strip()
        if not base_dir:
            return self.config
        p = Path(base_dir)
        if not p.is_absolute():
            p = self.root / p
        return replace(self.config, base_dir=p.resolve())

    def render(self, params: Dict[str, Any]) -> Dict[str, Any]:
        config = self._config_for(params)
        fragments = load_fragments(config)
        return {
            "ok": True,
            "title": config.title,
            "table_found": fragments.table_found,
            "risks_layout": fragments.risks_layout,
            "table_html": fragments.table_html,
            "risks_html": fragments.risks_html,
            "html": render_page(config.title, fragments),
        }

    def fetch(self, path: str) -> Dict[str, Any]:
        try:
            fs_path = resolve_static(self.config.static_dir, path)
        except APIError as exc:
            return {"ok": False, "error": exc.message, "error_code": "static_not_found", "status": exc.status}
        return {
            "ok": True,
            "path": str(fs_path),
            "content_type": content_type(str(fs_path)),
            "size": fs_path.stat().st_size,
        }
