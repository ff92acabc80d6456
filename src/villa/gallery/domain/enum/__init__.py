from .image_category import ImageCategory

__all__ = ["ImageCategory"]
