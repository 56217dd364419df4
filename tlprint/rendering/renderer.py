from __future__ import annotations

from PIL import Image

from ..protocol.types import Raster


def _flatten(img: Image.Image) -> Image.Image:
    """Composite transparent images onto white paper."""
    if img.mode in ("RGBA", "LA", "PA") or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
        paper = Image.new("RGBA", img.size, (255, 255, 255, 255))
        return Image.alpha_composite(paper, img)
    return img


def image_to_raster(img: Image.Image, threshold: int = 0) -> Raster:
    """Turn a Pillow image into a raster without dithering.

    Bilevel images keep their black pixels as dots; other images are flattened
    onto white, converted to grayscale and every pixel at or below `threshold`
    becomes a dot.
    """
    if img.mode == "1":
        data = list(img.getdata())
        return Raster(tuple(1 if p == 0 else 0 for p in data), img.width)
    img = _flatten(img).convert("L")
    data = list(img.getdata())
    return Raster(tuple(1 if p <= threshold else 0 for p in data), img.width)
