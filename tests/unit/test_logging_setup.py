import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "export"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from familyquest_core.logging_setup import JsonFormatter, configure_logging
from familyquest_renderer import CardGenerationData, CardRenderer, CardTemplate, get_color_scheme


class LoggingSetupTests(unittest.TestCase):
    def test_json_formatter_carries_event(self):
        record = logging.LogRecord("familyquest.renderer", logging.INFO, __file__, 1, "rendered", None, None)
        record.event = "card_rendered"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["event"], "card_rendered")
        self.assertEqual(payload["logger"], "familyquest.renderer")
        self.assertEqual(payload["msg"], "rendered")
        self.assertNotIn("template_id", payload)

    def test_json_formatter_lifts_card_fields(self):
        record = logging.LogRecord("familyquest.export", logging.INFO, __file__, 1, "saved %s", ("card",), None)
        record.event = "card_downloaded"
        record.target = Path("/tmp/card.png")
        record.size_bytes = 512
        record.unrelated = "dropped"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["msg"], "saved card")
        self.assertEqual(payload["target"], str(Path("/tmp/card.png")))
        self.assertEqual(payload["size_bytes"], 512)
        self.assertNotIn("unrelated", payload)

    def test_render_log_record_carries_template(self):
        data = CardGenerationData.from_dict({"title": "Logged", "colorScheme": get_color_scheme("lavender_dream")})
        with self.assertLogs("familyquest.renderer", level="DEBUG") as captured:
            CardRenderer().render(data, CardTemplate(id="milestone", name="Milestone"))
        record = next(r for r in captured.records if getattr(r, "event", None) == "card_rendered")
        self.assertEqual(record.template_id, "milestone")
        self.assertEqual(record.layout, "celebration")
        self.assertGreaterEqual(record.duration_ms, 0)

    def test_configure_writes_to_directory(self):
        logger = logging.getLogger("familyquest")
        saved = list(logger.handlers)
        for handler in saved:
            logger.removeHandler(handler)
        try:
            with tempfile.TemporaryDirectory() as tmp:
                configured = configure_logging(console=False, directory=Path(tmp))
                self.assertIs(configured, logger)
                self.assertIs(configure_logging(console=False, directory=Path(tmp)), logger)
                self.assertEqual(len(logger.handlers), 1)
                logger.handlers[0].flush()
                lines = (Path(tmp) / "familyquest.log").read_text(encoding="utf-8").splitlines()
                self.assertEqual(json.loads(lines[0])["event"], "logging_configured")
                self.assertEqual(json.loads(lines[0])["target"], str(Path(tmp) / "familyquest.log"))
                for handler in list(logger.handlers):
                    logger.removeHandler(handler)
                    handler.close()
        finally:
            for handler in saved:
                logger.addHandler(handler)


if __name__ == "__main__":
    unittest.main()
