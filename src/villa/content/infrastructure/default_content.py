"""初期表示用のコンテンツセクション"""

from villa.content.domain.enum import SectionType
from villa.content.domain.repository import ContentSectionDetails
from villa.content.domain.value_object import SectionMetadata

_TEXT = SectionMetadata(editable=True, type=SectionType.TEXT)
_TEXTAREA = SectionMetadata(editable=True, type=SectionType.TEXTAREA)

DEFAULT_SECTIONS: list[ContentSectionDetails] = [
    {
        "section_key": "hero-title",
        "title": "Hero Title",
        "content": "Luxury Villa Retreat",
        "metadata": _TEXT,
    },
    {
        "section_key": "hero-subtitle",
        "title": "Hero Subtitle",
        "content": "Experience unparalleled comfort in our stunning contemporary villa",
        "metadata": _TEXT,
    },
    {
        "section_key": "property-title",
        "title": "Property Title",
        "content": "Modern Luxury Villa",
        "metadata": _TEXT,
    },
    {
        "section_key": "property-bedrooms",
        "title": "Number of Bedrooms",
        "content": "3",
        "metadata": _TEXT,
    },
    {
        "section_key": "property-bathrooms",
        "title": "Number of Bathrooms",
        "content": "2½",
        "metadata": _TEXT,
    },
    {
        "section_key": "property-guests",
        "title": "Maximum Guests",
        "content": "6",
        "metadata": _TEXT,
    },
    {
        "section_key": "property-description",
        "title": "Property Description",
        "content": (
            "Discover the perfect blend of modern luxury and natural beauty in our "
            "stunning contemporary villa. Perched on a hillside with breathtaking "
            "panoramic views, this architectural masterpiece offers an unparalleled "
            "vacation experience.\n\n"
            "The villa features expansive living spaces with floor-to-ceiling windows "
            "that blur the line between indoor and outdoor living. Each bedroom offers "
            "stunning views and an en-suite bathroom, ensuring privacy and comfort for "
            "all guests.\n\n"
            "Whether you're seeking a romantic getaway, family vacation, or corporate "
            "retreat, our villa provides the perfect sanctuary with world-class "
            "amenities and personalized service."
        ),
        "metadata": _TEXTAREA,
    },
]
