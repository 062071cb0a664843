import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "export"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from familyquest_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual((cfg.render.default_width, cfg.render.default_height), (400, 400))
            self.assertEqual(cfg.render.color_scheme, "mint_celebration")
            self.assertEqual(cfg.export.default_filename, "family-quest-card.png")

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.render.color_scheme = "family_warmth"
            cfg.export.download_dir = tmp
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.render.color_scheme, "family_warmth")
            self.assertEqual(reloaded.export.download_dir, tmp)

    def test_normalizes_out_of_range_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "render": {"default_width": 5, "default_height": 99999, "color_scheme": "neon", "image_format": "tiff"},
                "export": {"clipboard_timeout_s": 0},
                "diagnostics": {"keep_log_files": 0},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.default_width, 16)
            self.assertEqual(cfg.render.default_height, 4096)
            self.assertEqual(cfg.render.color_scheme, "mint_celebration")
            self.assertEqual(cfg.render.image_format, "PNG")
            self.assertEqual(cfg.export.clipboard_timeout_s, 1.0)
            self.assertEqual(cfg.diagnostics.keep_log_files, 2)

    def test_unreadable_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())


if __name__ == "__main__":
    unittest.main()
