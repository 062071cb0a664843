import sys
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from familyquest_renderer.encoding import decode_data_uri, encode
from familyquest_renderer.errors import InvalidDataUriError


class EncodingTests(unittest.TestCase):
    def test_png_data_uri(self):
        uri = encode(Image.new("RGB", (8, 8), (1, 2, 3)))
        self.assertTrue(uri.startswith("data:image/png;base64,"))
        mime, payload = decode_data_uri(uri)
        self.assertEqual(mime, "image/png")
        self.assertTrue(payload.startswith(b"\x89PNG"))

    def test_identical_pixels_identical_uri(self):
        a = Image.new("RGB", (16, 16), (200, 10, 10))
        b = Image.new("RGB", (16, 16), (200, 10, 10))
        self.assertEqual(encode(a), encode(b))

    def test_rejects_unknown_format(self):
        with self.assertRaises(ValueError):
            encode(Image.new("RGB", (2, 2)), format="TIFF")

    def test_malformed_uris(self):
        for bad in ("hello", "data:image/png,raw", "data:image/png;base64,@@@"):
            with self.subTest(uri=bad):
                with self.assertRaises(InvalidDataUriError):
                    decode_data_uri(bad)


if __name__ == "__main__":
    unittest.main()
