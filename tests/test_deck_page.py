#!/usr/bin/env python3
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from scripts import deck_page
from scripts.deck_config import DeckConfig
from scripts.deck_page import (
    RISKS_PLACEHOLDER,
    TABLE_PLACEHOLDER,
    load_fragments,
    read_source,
    render_fragments,
    render_slide_deck,
)


class DeckPageTest(unittest.TestCase):
    def test_missing_sources_use_placeholders(self):
        with tempfile.TemporaryDirectory() as td:
            cfg = DeckConfig(base_dir=Path(td), static_dir=Path(td))
            fragments = load_fragments(cfg)
            self.assertTrue(fragments.table_found)
            self.assertIn("<th>Column A</th>", fragments.table_html)
            self.assertEqual(fragments.risks_layout, "fallback")
            self.assertIn("<p>No risks provided yet.</p>", fragments.risks_html)
            self.assertEqual(fragments, render_fragments(TABLE_PLACEHOLDER, RISKS_PLACEHOLDER, cfg.logos))

    def test_invalid_utf8_bytes_keep_document(self):
        with tempfile.TemporaryDirectory() as td:
            base = Path(td)
            (base / "risks.md").write_bytes(b"### Actors\n- Caf\xe9 owners\n\n### Methods\n- Bans\n")
            (base / "table.md").write_bytes(b"| A | B\xff |\n| --- | --- |\n| 1 | 2 |\n")
            self.assertEqual(read_source(base / "risks.md", RISKS_PLACEHOLDER).splitlines()[1], "- Caf\ufffd owners")

            fragments = load_fragments(DeckConfig(base_dir=base, static_dir=base))
            self.assertEqual(fragments.risks_layout, "columns")
            self.assertIn("<li>Caf\ufffd owners</li>", fragments.risks_html)
            self.assertIn("<th>B\ufffd</th>", fragments.table_html)
            self.assertNotIn("Column A", fragments.table_html)

    def test_table_not_found_falls_back_to_pre(self):
        fragments = render_fragments("plain <text>", "", {})
        self.assertFalse(fragments.table_found)
        self.assertEqual(fragments.table_html, "<pre>plain &lt;text&gt;</pre>")
        self.assertEqual(fragments.risks_html, '<div class="risks-fallback"></div>')
        self.assertEqual(fragments.risks_layout, "fallback")

    def test_page_reads_sources_fresh(self):
        with tempfile.TemporaryDirectory() as td:
            base = Path(td)
            cfg = DeckConfig(title="Demo <Deck>", base_dir=base, static_dir=base)
            (base / "table.md").write_text("| SSB | Other |\n| --- | --- |\n| x | y |\n", encoding="utf-8")
            (base / "risks.md").write_text("### Actors\n- A1\n\n### Methods\n- M1\n", encoding="utf-8")

            page = render_slide_deck(cfg)
            self.assertIn("<title>Demo &lt;Deck&gt;</title>", page)
            self.assertIn('<div class="risks-grid">', page)
            self.assertIn("<li>M1</li>", page)
            self.assertEqual(page.count('src="/hermies-256.png"'), 4)
            self.assertIn("const slides = Array.from", page)

            (base / "risks.md").write_text("# Changed\n", encoding="utf-8")
            page = render_slide_deck(cfg)
            self.assertIn('<div class="risks-fallback"><h1>Changed</h1></div>', page)

    def test_cli_without_bundled_config_uses_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            base = Path(td)
            (base / "risks.md").write_text("### Actors\n- A1\n\n### Methods\n- M1\n", encoding="utf-8")
            out_html = base / "out" / "deck.html"
            argv = ["deck_page.py", "--base-dir", str(base), "--out-html", str(out_html)]
            with patch("scripts.deck_config.CFG_DEFAULT", base / "missing.toml"), \
                    patch("sys.argv", argv), \
                    patch("sys.stdout", new_callable=io.StringIO) as stdout:
                self.assertEqual(deck_page.main(), 0)
            summary = json.loads(stdout.getvalue())
            self.assertTrue(summary["ok"])
            self.assertEqual(summary["risks_layout"], "columns")
            self.assertIn("<li>M1</li>", out_html.read_text(encoding="utf-8"))

    def test_cli_bad_config_exits_nonzero(self):
        with tempfile.TemporaryDirectory() as td:
            out_html = Path(td) / "deck.html"
            argv = ["deck_page.py", "--config", str(Path(td) / "nope.toml"), "--out-html", str(out_html)]
            with patch("sys.argv", argv), patch("sys.stderr", new_callable=io.StringIO) as stderr:
                self.assertEqual(deck_page.main(), 2)
            self.assertIn("CONFIG_ERROR", stderr.getvalue())
            self.assertFalse(out_html.exists())


if __name__ == "__main__":
    unittest.main()
