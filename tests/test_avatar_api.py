"""
Tests for the /api/avatar endpoint.
"""

import pytest

from initials_avatar import config as config_module
from initials_avatar.renderer import render_avatar_svg
from initials_avatar.schemas import AvatarConfig


def _text_attr(body: str, attr: str) -> str:
    marker = f'{attr}="'
    start = body.index(marker) + len(marker)
    return body[start:body.index('"', start)]


class TestAvatarEndpoint:
    """Test suite for GET /api/avatar."""

    def test_no_parameters_returns_default_avatar(self, client):
        response = client.get("/api/avatar")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/svg+xml"
        assert response.text == render_avatar_svg(AvatarConfig())

    def test_unrecognized_parameters_return_default_avatar(self, client):
        response = client.get("/api/avatar", params={"foo": "bar"})

        assert response.status_code == 200
        assert response.text == render_avatar_svg(AvatarConfig())

    def test_name_and_lastname(self, client):
        response = client.get("/api/avatar", params={"name": "Jane", "lastname": "Doe"})

        assert response.status_code == 200
        assert "JD" in response.text

    def test_name_only(self, client):
        response = client.get("/api/avatar", params={"name": "Jane"})
        assert "JA" in response.text

    def test_custom_parameters(self, client):
        response = client.get(
            "/api/avatar",
            params={
                "name": "ada",
                "lastname": "lovelace",
                "backgroundColor": "ff0000",
                "color": "fff",
                "size": "256",
                "fontSize": "0.5",
                "fontWeight": "bold",
                "fontFamily": "serif",
            },
        )

        assert response.status_code == 200
        body = response.text
        assert 'width="256" height="256"' in body
        assert 'fill="#ff0000"' in body
        assert 'fill="#fff"' in body
        assert _text_attr(body, "font-size") == repr(256 * 0.5 * 0.64)
        assert 'font-weight="bold"' in body
        assert 'font-family="serif"' in body
        assert "AL" in body

    @pytest.mark.parametrize("size", ["1000", "0"])
    def test_out_of_range_size_uses_default(self, client, size):
        response = client.get("/api/avatar", params={"size": size})

        assert response.status_code == 200
        assert 'width="100" height="100"' in response.text
        assert _text_attr(response.text, "font-size") == "64"

    def test_out_of_range_font_size_uses_default(self, client):
        response = client.get("/api/avatar", params={"size": "200", "fontSize": "5"})

        assert _text_attr(response.text, "font-size") == "128"

    @pytest.mark.parametrize(
        "params",
        [
            {"backgroundColor": "not-a-color"},
            {"fontWeight": "heaviest"},
            {"size": "abc"},
            {"name": ""},
        ],
    )
    def test_invalid_input_still_returns_svg(self, client, params):
        response = client.get("/api/avatar", params=params)

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/svg+xml"
        assert response.text.count("<rect") == 1
        assert response.text.count("<text") == 1


class TestStrictValidation:
    """Test suite for STRICT_VALIDATION=true."""

    @pytest.fixture(autouse=True)
    def strict(self):
        config_module.settings.STRICT_VALIDATION = True

    def test_valid_request(self, client):
        response = client.get("/api/avatar", params={"color": "abc", "size": "64"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/svg+xml"

    def test_invalid_color_rejected(self, client):
        response = client.get("/api/avatar", params={"backgroundColor": "#ffffff"})

        assert response.status_code == 422
        assert "backgroundColor" in response.json()["detail"]

    def test_out_of_range_size_rejected(self, client):
        response = client.get("/api/avatar", params={"size": "1000"})

        assert response.status_code == 422
        assert "size" in response.json()["detail"]


class TestOpenAPI:
    """Test suite for the generated API description."""

    def test_avatar_operation_documented(self, client):
        response = client.get("/openapi.json")
        assert response.status_code == 200
        document = response.json()

        assert document["info"]["title"] == "Avatar image generator"
        assert document["info"]["version"] == "1.0.0"
        assert document["info"]["contact"]["email"] == "dev.santizapata@gmail.com"

        operation = document["paths"]["/api/avatar"]["get"]
        params = {p["name"]: p for p in operation["parameters"]}
        assert set(params) == {
            "name", "lastname", "backgroundColor", "color",
            "size", "fontSize", "fontWeight", "fontFamily",
        }
        assert all(p["in"] == "query" and not p["required"] for p in params.values())
        assert params["size"]["schema"] == {
            "type": "integer", "minimum": 16, "maximum": 512, "default": 100,
        }
        assert params["fontSize"]["schema"]["minimum"] == 0.5
        assert params["fontSize"]["schema"]["maximum"] == 1.2
        assert params["fontWeight"]["schema"]["enum"] == ["normal", "bold", "bolder", "lighter"]
        assert params["color"]["schema"]["pattern"] == "^[0-9a-fA-F]{3,6}$"
        assert "image/svg+xml" in operation["responses"]["200"]["content"]

    def test_docs_ui_served(self, client):
        response = client.get("/api-docs")

        assert response.status_code == 200
        assert "swagger" in response.text.lower()
