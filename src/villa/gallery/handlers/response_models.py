from villa.gallery.domain.entity import PropertyImage
from villa.shared.utils import ApiModel


class PropertyImageData(ApiModel):
    """物件画像のレスポンスモデル"""

    id: str
    category: str
    url: str
    title: str | None
    description: str | None
    sort_order: int
    is_active: bool


def to_response(image: PropertyImage) -> dict:
    return PropertyImageData(
        id=str(image.id),
        category=image.category.value,
        url=image.url,
        title=image.title,
        description=image.description,
        sort_order=image.sort_order,
        is_active=image.is_active,
    ).to_json_dict()
