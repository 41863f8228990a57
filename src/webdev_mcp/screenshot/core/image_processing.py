#!/usr/bin/env python3
"""
Image Processing for Screenshot Module

This module provides functions for post-processing captured screenshots:
fitting an image onto a fixed canvas and encoding the final file as base64.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- PIL Image object (2560x1600)
- Canvas size (819, 1456)

Expected output:
- 819x1456 image, the capture scaled to 819x512 and centered on white
"""

import base64
from typing import Tuple

from PIL import Image, ImageOps
from loguru import logger

from webdev_mcp.screenshot.core.constants import PAD_COLOR


def ensure_rgb(img: Image.Image) -> Image.Image:
    """
    Converts image to RGB mode, flattening transparency onto white.

    Args:
        img: PIL Image object to convert

    Returns:
        PIL.Image: Image in RGB mode
    """
    if img.mode == 'RGBA':
        # Create a white background image
        background = Image.new('RGB', img.size, PAD_COLOR)
        # Paste the image using the alpha channel as mask
        background.paste(img, mask=img.split()[3])
        return background
    elif img.mode != 'RGB':
        return img.convert('RGB')
    return img


def fit_to_canvas(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """
    Scales an image to fit inside ``size`` preserving aspect ratio and pads the
    remainder with opaque white, so the result is exactly ``size``.

    Args:
        img: PIL Image object to fit
        size: Target (width, height)

    Returns:
        PIL.Image: RGB image of exactly ``size``
    """
    width, height = img.size
    logger.info(f"Fitting image from {width}x{height} onto {size[0]}x{size[1]} canvas")
    return ImageOps.pad(ensure_rgb(img), size, method=Image.LANCZOS, color=PAD_COLOR)


def resize_image_file(source_path: str, target_path: str, size: Tuple[int, int]) -> Tuple[int, int]:
    """
    Fits the PNG at ``source_path`` onto a canvas and writes it to ``target_path``.

    Returns:
        Tuple[int, int]: Size of the written image
    """
    with Image.open(source_path) as img:
        img.load()
        fitted = fit_to_canvas(img, size)
    fitted.save(target_path, format="PNG")
    return fitted.size


def encode_file_base64(path: str) -> str:
    """Reads a file and returns its contents as a base64 string."""
    with open(path, "rb") as f:
        data = f.read()
    return base64.b64encode(data).decode("utf-8")
