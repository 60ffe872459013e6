#!/usr/bin/env python3
"""Config loader for the slide deck server (TOML or YAML)."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

ROOT = Path(__file__).resolve().parents[1]
ROOT = Path(os.getenv("SLIDE_DECK_ROOT", str(ROOT))).resolve()

import sys
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.errors import ConfigError


CFG_DEFAULT = ROOT / "config" / "slide_deck.toml"

DEFAULT_LOGOS: Dict[str, Dict[str, str]] = {
    "SSB": {"src": "/hermies-256.png", "alt": "SSB logo"},
    "ActivityPub": {"src": "/activitypub-logo.png", "alt": "ActivityPub logo"},
    "ANProto": {"src": "/anproto-logo.png", "alt": "ANProto logo"},
    "ATProto": {"src": "/atproto.jpeg", "alt": "ATProto logo"},
    "Nostr": {"src": "/nostr.png", "alt": "Nostr logo"},
    "Farcaster": {"src": "/farcaster.jpeg", "alt": "Farcaster logo"},
}


@dataclass
class DeckConfig:
    host: str = "127.0.0.1"
    port: int = 8099
    title: str = "ANProto Slide Deck"
    base_dir: Path = ROOT
    table_file: str = "table.md"
    risks_file: str = "risks.md"
    static_dir: Path = ROOT
    events_file: Optional[Path] = None
    logos: Dict[str, Dict[str, str]] = field(default_factory=lambda: dict(DEFAULT_LOGOS))

    @property
    def table_path(self) -> Path:
        return self.base_dir / self.table_file

    @property
    def risks_path(self) -> Path:
        return self.base_dir / self.risks_file


def _resolve(value: Any, anchor: Path) -> Path:
    p = Path(str(value)).expanduser()
    if not p.is_absolute():
        p = anchor / p
    return p.resolve()


def _read_raw(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"config not found: {path}", path=str(path))
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        else:
            with path.open("rb") as f:
                data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"invalid config: {path}", path=str(path), reason=str(exc)) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a table: {path}", path=str(path))
    return data


def config_from_dict(data: Dict[str, Any], anchor: Path = ROOT) -> DeckConfig:
    server = data.get("server", {}) if isinstance(data.get("server", {}), dict) else {}
    content = data.get("content", {}) if isinstance(data.get("content", {}), dict) else {}
    telemetry = data.get("telemetry", {}) if isinstance(data.get("telemetry", {}), dict) else {}
    logos = data.get("logos", None)

    try:
        port = int(server.get("port", 8099))
    except (TypeError, ValueError) as exc:
        raise ConfigError("invalid server.port: must be integer", value=server.get("port")) from exc
    if port < 0 or port > 65535:
        raise ConfigError("invalid server.port: must be in [0, 65535]", value=port)

    base_dir = _resolve(content.get("base_dir", "."), anchor)
    static_dir = _resolve(content["static_dir"], anchor) if content.get("static_dir") else base_dir
    events_file = _resolve(telemetry["events_file"], anchor) if telemetry.get("events_file") else None

    if logos is None:
        logo_map = dict(DEFAULT_LOGOS)
    elif isinstance(logos, dict):
        logo_map = {
            str(label): {"src": str(v.get("src", "")), "alt": str(v.get("alt", f"{label} logo"))}
            for label, v in logos.items()
            if isinstance(v, dict)
        }
    else:
        raise ConfigError("invalid logos: must be a table of label -> {src, alt}")

    return DeckConfig(
        host=str(server.get("host", "127.0.0.1")),
        port=port,
        title=str(content.get("title", "ANProto Slide Deck")),
        base_dir=base_dir,
        table_file=str(content.get("table_file", "table.md")),
        risks_file=str(content.get("risks_file", "risks.md")),
        static_dir=static_dir,
        events_file=events_file,
        logos=logo_map,
    )


def load_config(path: str | Path = "") -> DeckConfig:
    """Load a deck config; relative paths inside it resolve next to the file.

    With no explicit path, a missing bundled config yields ``DeckConfig()``
    defaults (installed copies do not ship ``config/``). An explicit path
    that does not exist still raises ``ConfigError``.
    """
    if not path:
        if not CFG_DEFAULT.exists():
            return DeckConfig()
        p = CFG_DEFAULT
    else:
        p = Path(path)
    p = p.expanduser().resolve()
    return config_from_dict(_read_raw(p), anchor=p.parent)
