import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from familyquest_renderer.catalog import CARD_COLOR_SCHEMES, CARD_TEMPLATES
from familyquest_renderer.colors import Color
from familyquest_renderer.composers import (
    COMPOSERS,
    compose_celebration,
    compose_progress,
    composer_for,
    format_percentage,
)
from familyquest_renderer.models import (
    COLOR_SLOTS,
    CardGenerationData,
    CardTemplate,
    FamilyData,
    MilestoneData,
    TemplateId,
)


class RecordingRenderer:
    """Stands in for PrimitiveRenderer and records every call a composer issues."""

    def __init__(self, width=400, height=400):
        self.width = width
        self.height = height
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))

        return record

    def texts(self):
        return [args[0] for name, args, _ in self.calls if name == "draw_text"]

    def ops(self):
        return [name for name, _, _ in self.calls]


def _data(full=True, avatars=("a", "b", "c"), progress=50):
    extra = {}
    if full:
        extra = {"subtitle": "Family Vacation Fund", "description": "Great progress!", "custom_text": "Keep going"}
    return CardGenerationData(
        title="First $500 Saved!",
        milestone_data=MilestoneData(title="m", achieved_at="2024-06-01", goal_title="Vacation", progress_percentage=progress),
        family_data=FamilyData(name="Smiths", member_count=len(avatars), avatars=avatars),
        color_scheme=CARD_COLOR_SCHEMES["mint_celebration"],
        **extra,
    )


def _run(template_id, data, width=400, height=400):
    r = RecordingRenderer(width, height)
    template = CARD_TEMPLATES.get(template_id) or CardTemplate(id=template_id, name=template_id)
    composer_for(template_id)(r, data, template)
    return r


class DispatchTableTests(unittest.TestCase):
    def test_every_template_has_a_composer(self):
        self.assertEqual(set(COMPOSERS), set(TemplateId))

    def test_unknown_id_uses_celebration_layout(self):
        self.assertIs(composer_for("milestone"), compose_celebration)
        unknown = _run("milestone", _data())
        celebration = _run("celebration", _data())
        self.assertEqual(unknown.calls, celebration.calls)


class OptionalFieldTests(unittest.TestCase):
    def test_fields_present_iff_elements_present(self):
        for template_id in ("celebration", "progress", "achievement", "family"):
            with self.subTest(template=template_id):
                full = _run(template_id, _data(full=True))
                bare = _run(template_id, _data(full=False))
                self.assertLess(len(bare.calls), len(full.calls))
                for text in ("Family Vacation Fund", "Great progress!"):
                    self.assertIn(text, full.texts())
                    self.assertNotIn(text, bare.texts())
                self.assertIn("First $500 Saved!", bare.texts())

    def test_custom_text_rendered_where_layout_has_it(self):
        for template_id in ("celebration", "achievement", "family"):
            with self.subTest(template=template_id):
                self.assertIn("Keep going", _run(template_id, _data()).texts())


class ProgressLayoutTests(unittest.TestCase):
    def test_bar_receives_progress(self):
        r = _run("progress", _data(progress=50), 320, 300)
        bars = [args for name, args, _ in r.calls if name == "draw_progress_bar"]
        self.assertEqual(len(bars), 1)
        x, y, width, height, progress = bars[0][:5]
        self.assertEqual((x, width, height, progress), (20, 280, 20, 50))
        self.assertAlmostEqual(y, 120)
        self.assertIn("50%", r.texts())

    def test_bar_never_sees_unclamped_progress(self):
        r = _run("progress", _data(progress=180))
        bars = [args for name, args, _ in r.calls if name == "draw_progress_bar"]
        self.assertEqual(bars[0][4], 100)

    def test_avatar_row_centered_and_evenly_spaced(self):
        r = RecordingRenderer(400, 400)
        compose_progress(r, _data(avatars=("a", "b", "c")), CARD_TEMPLATES["progress"])
        circles = [args for name, args, _ in r.calls if name == "draw_circle"]
        self.assertEqual(len(circles), 3)
        xs = [c[0] for c in circles]
        self.assertEqual(xs[1] - xs[0], xs[2] - xs[1])
        self.assertAlmostEqual((xs[0] + xs[-1]) / 2, 200)
        self.assertTrue(all(c[1] == 400 - 40 + 12 for c in circles))

    def test_no_avatars_no_circles(self):
        r = _run("progress", _data(avatars=()))
        self.assertNotIn("draw_circle", r.ops())


class FamilyLayoutTests(unittest.TestCase):
    def test_badge_with_decorations(self):
        r = _run("family", _data())
        circles = [args for name, args, _ in r.calls if name == "draw_circle"]
        scheme = CARD_COLOR_SCHEMES["mint_celebration"]
        self.assertEqual(len(circles), 3)
        self.assertEqual(circles[0][:3], (200, 200, 60))
        self.assertEqual(circles[1][:4], (240, 160, 15, scheme.secondary))
        self.assertEqual(circles[2][:4], (160, 240, 15, scheme.accent))


class ColorInvariantTests(unittest.TestCase):
    def test_composers_only_use_scheme_colors(self):
        scheme = CARD_COLOR_SCHEMES["mint_celebration"]
        allowed = {getattr(scheme, slot).rgb for slot in COLOR_SLOTS}
        for template_id in ("celebration", "progress", "achievement", "family"):
            r = _run(template_id, _data())
            for _name, args, kwargs in r.calls:
                for value in list(args) + list(kwargs.values()):
                    if isinstance(value, Color):
                        self.assertIn(value.rgb, allowed, msg=template_id)


class FormatPercentageTests(unittest.TestCase):
    def test_formats(self):
        self.assertEqual(format_percentage(50.0), "50%")
        self.assertEqual(format_percentage(33.333), "33.3%")

    def test_never_rounds_up_to_full(self):
        self.assertEqual(format_percentage(99.96), "99.9%")
        self.assertEqual(format_percentage(99.99), "99.9%")
        self.assertEqual(format_percentage(100), "100%")
        self.assertEqual(format_percentage(33.3), "33.3%")
        self.assertEqual(format_percentage(0.04), "0%")


if __name__ == "__main__":
    unittest.main()
