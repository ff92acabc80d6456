from enum import Enum


class ImageCategory(str, Enum):
    """物件画像の分類"""

    EXTERIOR = "exterior"
    INTERIOR = "interior"
    AMENITY = "amenity"
