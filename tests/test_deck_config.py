#!/usr/bin/env python3
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from core.errors import ConfigError
from scripts.deck_config import CFG_DEFAULT, DEFAULT_LOGOS, DeckConfig, config_from_dict, load_config


class DeckConfigTest(unittest.TestCase):
    def test_default_config_file_loads(self):
        cfg = load_config(CFG_DEFAULT)
        self.assertEqual(cfg.port, 8099)
        self.assertEqual(cfg.table_path.name, "table.md")
        self.assertEqual(cfg.risks_path.parent, cfg.base_dir)
        self.assertIn("ANProto", cfg.logos)

    def test_toml_relative_paths_resolve_next_to_file(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            p = root / "deck.toml"
            p.write_text(
                '[server]\nport = 9000\n\n[content]\nbase_dir = "src"\ntable_file = "t.md"\n\n'
                '[telemetry]\nevents_file = "logs/e.jsonl"\n',
                encoding="utf-8",
            )
            cfg = load_config(p)
            self.assertEqual(cfg.port, 9000)
            self.assertEqual(cfg.base_dir, (root / "src").resolve())
            self.assertEqual(cfg.static_dir, cfg.base_dir)
            self.assertEqual(cfg.table_path, (root / "src" / "t.md").resolve())
            self.assertEqual(cfg.events_file, (root / "logs" / "e.jsonl").resolve())
            self.assertEqual(cfg.logos, DEFAULT_LOGOS)

    def test_yaml_config(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "deck.yaml"
            p.write_text(
                "server:\n  host: 0.0.0.0\ncontent:\n  title: Demo\nlogos:\n  Foo:\n    src: /foo.png\n",
                encoding="utf-8",
            )
            cfg = load_config(p)
            self.assertEqual(cfg.host, "0.0.0.0")
            self.assertEqual(cfg.title, "Demo")
            self.assertEqual(cfg.logos, {"Foo": {"src": "/foo.png", "alt": "Foo logo"}})
            self.assertIsNone(cfg.events_file)

    def test_missing_config_raises(self):
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError) as ctx:
                load_config(Path(td) / "nope.toml")
            self.assertEqual(ctx.exception.code, "CONFIG_ERROR")
            self.assertIn("path", ctx.exception.to_dict()["details"])

    def test_missing_bundled_config_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            with patch("scripts.deck_config.CFG_DEFAULT", Path(td) / "slide_deck.toml"):
                self.assertEqual(load_config(), DeckConfig())
                self.assertEqual(load_config(""), DeckConfig())

    def test_invalid_toml_raises(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "bad.toml"
            p.write_text("[server\nport = ", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(p)

    def test_invalid_port(self):
        with self.assertRaises(ConfigError):
            config_from_dict({"server": {"port": "abc"}})
        with self.assertRaises(ConfigError):
            config_from_dict({"server": {"port": 70000}})


if __name__ == "__main__":
    unittest.main()
