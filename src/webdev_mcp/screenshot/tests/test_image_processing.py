#!/usr/bin/env python3
"""
Unit tests for core/image_processing.py
"""

import base64
import os
import tempfile
import unittest

from PIL import Image

from webdev_mcp.screenshot.core.image_processing import (
    encode_file_base64,
    ensure_rgb,
    fit_to_canvas,
    resize_image_file
)

CANVAS = (819, 1456)


class TestImageProcessing(unittest.TestCase):
    """Test cases for image processing functions"""

    def test_ensure_rgb_flattens_alpha_onto_white(self):
        img = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
        result = ensure_rgb(img)

        self.assertEqual(result.mode, "RGB")
        self.assertEqual(result.getpixel((0, 0)), (255, 255, 255))

    def test_ensure_rgb_converts_other_modes(self):
        self.assertEqual(ensure_rgb(Image.new("L", (4, 4))).mode, "RGB")

    def test_fit_landscape_letterboxes(self):
        result = fit_to_canvas(Image.new("RGB", (2560, 1600), (0, 128, 0)), CANVAS)

        self.assertEqual(result.size, CANVAS)
        self.assertEqual(result.getpixel((400, 0)), (255, 255, 255))
        self.assertEqual(result.getpixel((400, 1455)), (255, 255, 255))
        self.assertEqual(result.getpixel((400, 728)), (0, 128, 0))

    def test_fit_portrait_pillarboxes(self):
        result = fit_to_canvas(Image.new("RGB", (400, 1456), (200, 0, 0)), CANVAS)

        self.assertEqual(result.size, CANVAS)
        self.assertEqual(result.getpixel((0, 700)), (255, 255, 255))
        self.assertEqual(result.getpixel((818, 700)), (255, 255, 255))
        self.assertEqual(result.getpixel((409, 700)), (200, 0, 0))

    def test_fit_small_image_is_upscaled(self):
        result = fit_to_canvas(Image.new("RGB", (100, 100), (0, 0, 255)), CANVAS)

        self.assertEqual(result.size, CANVAS)
        # Square fills the full width
        self.assertEqual(result.getpixel((5, 728)), (0, 0, 255))

    def test_resize_image_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            source = os.path.join(temp_dir, "source.png")
            target = os.path.join(temp_dir, "target.png")
            Image.new("RGBA", (1920, 1080), (10, 20, 30, 255)).save(source, format="PNG")

            size = resize_image_file(source, target, CANVAS)

            self.assertEqual(size, CANVAS)
            with Image.open(target) as img:
                self.assertEqual(img.format, "PNG")
                self.assertEqual(img.size, CANVAS)
                self.assertEqual(img.mode, "RGB")

    def test_encode_file_base64(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "blob.bin")
            with open(path, "wb") as f:
                f.write(b"\x89PNG\r\n\x1a\n")

            encoded = encode_file_base64(path)

        self.assertIsInstance(encoded, str)
        self.assertEqual(base64.b64decode(encoded), b"\x89PNG\r\n\x1a\n")


if __name__ == "__main__":
    unittest.main()
