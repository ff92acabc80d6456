from .image_id import ImageId

__all__ = ["ImageId"]
