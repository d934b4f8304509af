"""
Tests du router images.
"""

import base64

from src.domain.entities.image_data import ImageData
from src.domain.exceptions import AuthorizationError, InvalidImageError, ResourceNotFoundError

BASE = "/v1.0/adverts/10/images"
PNG = b"\x89PNG\r\n\x1a\nfake"


class TestImagesRouter:
    """Tests des endpoints images."""

    def test_upload(self, auth_client, services, authenticated_user):
        services["image"].upload_image_to_advert.return_value = ImageData(
            id=3, advert_id=10, name="velo.png", content_type="image/png", payload=PNG
        )

        response = auth_client.post(BASE, files={"file": ("velo.png", PNG, "image/png")})

        assert response.status_code == 201
        assert response.json() == {
            "id": 3,
            "advert_id": 10,
            "name": "velo.png",
            "content_type": "image/png",
            "size": len(PNG),
        }
        args = services["image"].upload_image_to_advert.call_args.args
        assert args[0] == 10
        assert args[2] == authenticated_user

    def test_upload_not_owner(self, auth_client, services):
        services["image"].upload_image_to_advert.side_effect = AuthorizationError()

        response = auth_client.post(BASE, files={"file": ("velo.png", PNG, "image/png")})

        assert response.status_code == 403

    def test_upload_rejected(self, auth_client, services):
        services["image"].upload_image_to_advert.side_effect = InvalidImageError("fichier vide")

        response = auth_client.post(BASE, files={"file": ("notes.txt", b"x", "text/plain")})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_IMAGE"

    def test_upload_requires_token(self, client):
        response = client.post(BASE, files={"file": ("velo.png", PNG, "image/png")})

        assert response.status_code == 401

    def test_list_base64(self, client, services):
        services["image"].find_byte_list_to_advert.return_value = [PNG, b"second"]

        response = client.get(BASE)

        assert response.status_code == 200
        body = response.json()
        assert body["advert_id"] == 10
        assert [base64.b64decode(i) for i in body["images"]] == [PNG, b"second"]

    def test_get_raw_content(self, client, services):
        services["image"].find_image_by_id_and_by_advert_id.return_value = ImageData(
            id=3, advert_id=10, name="velo.png", content_type="image/png", payload=PNG
        )

        response = client.get(f"{BASE}/3")

        assert response.status_code == 200
        assert response.content == PNG
        assert response.headers["content-type"] == "image/png"
        services["image"].find_image_by_id_and_by_advert_id.assert_called_once_with(3, 10)

    def test_get_unknown(self, client, services):
        services["image"].find_image_by_id_and_by_advert_id.side_effect = ResourceNotFoundError(
            "Image", "id", 3
        )

        assert client.get(f"{BASE}/3").status_code == 404

    def test_delete(self, auth_client, services, authenticated_user):
        response = auth_client.delete(f"{BASE}/3")

        assert response.status_code == 204
        services["image"].delete_image_by_id_and_by_advert_id.assert_called_once_with(
            3, 10, authenticated_user
        )
