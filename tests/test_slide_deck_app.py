#!/usr/bin/env python3
import json
import tempfile
import unittest
from pathlib import Path

from apps.slide_deck.app import SlideDeckApp
from core.telemetry import TelemetryClient
from scripts.deck_config import DeckConfig


class SlideDeckAppTest(unittest.TestCase):
    def test_render_with_base_dir_override(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            src = root / "talk"
            src.mkdir()
            (src / "risks.md").write_text(
                "### Actors\n- Platforms\n\n### Methods\n  - **Risk**: data loss\n", encoding="utf-8"
            )
            app = SlideDeckApp(config=DeckConfig(base_dir=root, static_dir=root), root=root)

            out = app.render({"base_dir": "talk"})
            self.assertTrue(out["ok"])
            self.assertEqual(out["risks_layout"], "columns")
            self.assertIn("<li>**Risk**: data loss</li>", out["risks_html"])
            self.assertTrue(out["table_found"])
            self.assertIn("<th>Column A</th>", out["table_html"])
            self.assertIn(out["risks_html"], out["html"])

            default = app.render({})
            self.assertEqual(default["risks_layout"], "fallback")

    def test_fetch_static(self):
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "pfd.jpg").write_bytes(b"jpeg")
            app = SlideDeckApp(config=DeckConfig(base_dir=root, static_dir=root), root=root)
            hit = app.fetch("/pfd.jpg")
            self.assertTrue(hit["ok"])
            self.assertEqual(hit["content_type"], "image/jpeg")
            self.assertEqual(hit["size"], 4)
            miss = app.fetch("/../pfd.jpg")
            self.assertFalse(miss["ok"])
            self.assertEqual(miss["status"], 404)

    def test_default_app_uses_bundled_deck(self):
        out = SlideDeckApp().render({})
        self.assertEqual(out["risks_layout"], "columns")
        self.assertIn("<span>ANProto</span>", out["table_html"])


class TelemetryTest(unittest.TestCase):
    def test_emit_appends_jsonl(self):
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "nested" / "events.jsonl"
            c = TelemetryClient(events_file=p)
            c.emit(module="deck_server", action="render", status="ok", request_id="r1", latency_ms=3)
            c.emit(module="deck_server", action="static", status="failed", error_code="404")
            rows = [json.loads(x) for x in p.read_text(encoding="utf-8").strip().splitlines()]
            self.assertEqual(len(rows), 2)
            self.assertEqual(rows[0]["request_id"], "r1")
            self.assertEqual(rows[1]["error_code"], "404")
            self.assertEqual(rows[1]["meta"], {})


if __name__ == "__main__":
    unittest.main()
