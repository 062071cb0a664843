import os
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "export"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from familyquest_core.config import AppConfig, load_config
from familyquest_core.diagnostics import build_doctor_payload, scrub_home


class DiagnosticsTests(unittest.TestCase):
    def test_doctor_payload_shape(self):
        cfg = load_config(Path("/tmp/nonexistent-familyquest-config.json"))
        payload = build_doctor_payload(cfg)
        for key in ("platform", "python", "pillow", "features", "fonts", "clipboard_backend", "rss_mb", "download_dir", "config"):
            self.assertIn(key, payload)
        self.assertTrue(payload["features"]["freetype2"])
        self.assertGreater(payload["rss_mb"], 0.0)
        self.assertEqual(payload["config"]["render"]["default_width"], 400)

    def test_doctor_payload_hides_home_directory(self):
        cfg = AppConfig()
        cfg.export.download_dir = str(Path.home() / "Pictures" / "cards")
        payload = build_doctor_payload(cfg)
        expected = os.path.join("~", "Pictures", "cards")
        self.assertEqual(payload["download_dir"], expected)
        self.assertEqual(payload["config"]["export"]["download_dir"], expected)
        self.assertTrue(payload["config_path"].startswith("~"))

    def test_scrub_home_only_rewrites_paths_under_home(self):
        home = os.sep + os.path.join("home", "robin")
        value = {
            "inside": os.path.join(home, "Downloads"),
            "exact": home,
            "sibling": home + "son",
            "nested": [os.path.join(home, "a.ttf"), 3, None],
        }
        out = scrub_home(value, home=home)
        self.assertEqual(out["inside"], os.path.join("~", "Downloads"))
        self.assertEqual(out["exact"], "~")
        self.assertEqual(out["sibling"], home + "son")
        self.assertEqual(out["nested"], [os.path.join("~", "a.ttf"), 3, None])


if __name__ == "__main__":
    unittest.main()
