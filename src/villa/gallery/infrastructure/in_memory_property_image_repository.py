import copy
from collections.abc import Callable, Iterable

from villa.gallery.domain.entity import PropertyImage, PropertyImageChanges
from villa.gallery.domain.enum import ImageCategory
from villa.gallery.domain.repository import (
    PropertyImageDetails,
    PropertyImageRepository,
)
from villa.gallery.domain.value_object import ImageId
from villa.gallery.infrastructure.default_images import default_images


class InMemoryPropertyImageRepository(PropertyImageRepository):
    """プロセスメモリ上の dict を使った PropertyImageRepository の具象実装"""

    def __init__(
        self,
        seed: Iterable[PropertyImageDetails] | None = None,
        id_factory: Callable[[], ImageId] = ImageId.generate,
    ) -> None:
        self._id_factory = id_factory
        self._images: dict[ImageId, PropertyImage] = {}
        for details in default_images() if seed is None else seed:
            self.create(details)

    def find_all(self, category: ImageCategory | None = None) -> list[PropertyImage]:
        images = [
            copy.copy(image)
            for image in self._images.values()
            if image.is_active and (category is None or image.category == category)
        ]
        return sorted(images, key=lambda image: image.sort_order)

    def find_by_id(self, image_id: ImageId) -> PropertyImage | None:
        image = self._images.get(image_id)
        return copy.copy(image) if image is not None else None

    def create(self, details: PropertyImageDetails) -> PropertyImage:
        image = PropertyImage(
            id=self._id_factory(),
            category=ImageCategory(details["category"]),
            url=details["url"],
            title=details.get("title"),
            description=details.get("description"),
            sort_order=details.get("sort_order", 0),
            is_active=details.get("is_active", True),
        )
        self._images[image.id] = image
        return copy.copy(image)

    def update(
        self, image_id: ImageId, changes: PropertyImageChanges
    ) -> PropertyImage | None:
        existing = self._images.get(image_id)
        if existing is None:
            return None

        image = copy.copy(existing)
        image.apply(changes)
        self._images[image_id] = image
        return copy.copy(image)

    def delete(self, image_id: ImageId) -> bool:
        return self._images.pop(image_id, None) is not None
