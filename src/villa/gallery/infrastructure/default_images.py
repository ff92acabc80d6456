"""初期表示用の物件画像"""

from villa.gallery.domain.enum import ImageCategory
from villa.gallery.domain.repository import PropertyImageDetails

_UNSPLASH = "https://images.unsplash.com"
_HERO = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=1920&h=1080"
_CARD = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600"

_EXTERIOR_URLS = [
    "https://demo-source.imgix.net/house.jpg",
    f"{_UNSPLASH}/photo-1600596542815-ffad4c1539a9{_HERO}",
    f"{_UNSPLASH}/photo-1600607687939-ce8a6c25118c{_HERO}",
    f"{_UNSPLASH}/photo-1600585154340-be6161a56a0c{_HERO}",
    f"{_UNSPLASH}/photo-1600566753086-00f18fb6b3ea{_HERO}",
]

_INTERIORS = [
    (
        "https://demo-source.imgix.net/plant.jpg",
        "Living Room",
        "Open-concept design with panoramic views",
    ),
    (
        f"{_UNSPLASH}/photo-1631049307264-da0ec9d70304{_CARD}",
        "Master Suite",
        "King bed with stunning ocean views",
    ),
    (
        f"{_UNSPLASH}/photo-1556909114-f6e7ad7d3136{_CARD}",
        "Gourmet Kitchen",
        "Professional-grade appliances",
    ),
    (
        f"{_UNSPLASH}/photo-1620626011761-996317b8d101{_CARD}",
        "Spa Bathroom",
        "Marble finishes and soaking tub",
    ),
]

_AMENITIES = [
    (
        f"{_UNSPLASH}/photo-1571896349842-33c89424de2d{_CARD}",
        "Infinity Pool & Spa",
        "Relax in our stunning infinity pool with panoramic ocean views",
    ),
    (
        f"{_UNSPLASH}/photo-1571019613454-1cb2f99b2d8b{_CARD}",
        "Private Fitness Center",
        "Stay active in our fully equipped private gym",
    ),
]


def default_images() -> list[PropertyImageDetails]:
    images: list[PropertyImageDetails] = [
        {
            "category": ImageCategory.EXTERIOR,
            "url": url,
            "title": f"Exterior View {index + 1}",
            "description": "Beautiful exterior view of the luxury villa",
            "sort_order": index,
        }
        for index, url in enumerate(_EXTERIOR_URLS)
    ]
    for category, entries in (
        (ImageCategory.INTERIOR, _INTERIORS),
        (ImageCategory.AMENITY, _AMENITIES),
    ):
        images.extend(
            {
                "category": category,
                "url": url,
                "title": title,
                "description": description,
                "sort_order": index,
            }
            for index, (url, title, description) in enumerate(entries)
        )
    return images
