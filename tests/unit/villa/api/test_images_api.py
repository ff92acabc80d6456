NEW_IMAGE = {
    "category": "amenity",
    "url": "https://images.unsplash.com/photo-wine-cellar.jpg",
    "title": "Wine Cellar",
    "sortOrder": 2,
}


class TestImagesApi:
    def test_list_seeded_images(self, call_api):
        status, body = call_api("GET", "/api/images")

        assert status == 200
        assert len(body) == 11

    def test_filter_by_category(self, call_api):
        status, body = call_api("GET", "/api/images", query={"category": "amenity"})

        assert status == 200
        assert [image["title"] for image in body] == [
            "Infinity Pool & Spa",
            "Private Fitness Center",
        ]

    def test_unknown_category(self, call_api):
        status, _ = call_api("GET", "/api/images", query={"category": "garage"})

        assert status == 400

    def test_create_get_update_delete(self, call_api):
        status, created = call_api("POST", "/api/images", NEW_IMAGE)
        assert status == 201
        assert created["isActive"] is True

        status, body = call_api("GET", f"/api/images/{created['id']}")
        assert status == 200
        assert body == created

        status, body = call_api(
            "PUT", f"/api/images/{created['id']}", {"isActive": False}
        )
        assert status == 200
        assert body["isActive"] is False
        assert body["title"] == "Wine Cellar"

        _, listed = call_api("GET", "/api/images", query={"category": "amenity"})
        assert created["id"] not in [image["id"] for image in listed]

        status, body = call_api("DELETE", f"/api/images/{created['id']}")
        assert status == 200
        assert body == {"message": "Image deleted successfully"}

        status, _ = call_api("GET", f"/api/images/{created['id']}")
        assert status == 404

    def test_delete_unknown_image(self, call_api):
        status, body = call_api("DELETE", "/api/images/missing")

        assert status == 404
        assert body == {"message": "Image not found"}

    def test_update_unknown_image(self, call_api):
        status, _ = call_api("PUT", "/api/images/missing", {"sortOrder": 1})

        assert status == 404
