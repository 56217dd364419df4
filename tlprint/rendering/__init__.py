from .renderer import image_to_raster

__all__ = ["image_to_raster"]
