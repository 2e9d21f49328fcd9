"""
Tests for Meal CMS API ViewSets (mealcms.api.views).
"""

from unittest import mock

import pytest

pytestmark = pytest.mark.urls("mealcms.tests.test_api_urls")

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from mealcms.schema import Attribute, ComponentSchema, SchemaRegistry

User = get_user_model()


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def api_client(db):
    user = User.objects.create_user(username="api_user", password="test123")
    client = APIClient()
    client.force_authenticate(user=user)
    return client


# ═══════════════════════════════════════════════════════════════════
# ComponentSchemaViewSet
# ═══════════════════════════════════════════════════════════════════


class TestComponentAPI:
    """Tests for component schema endpoints."""

    def test_list_components(self, api_client):
        """GET /api/mealcms/components/ returns every component sorted by uid."""
        response = api_client.get("/api/mealcms/components/")

        assert response.status_code == 200
        assert [c["uid"] for c in response.data] == [
            "mega-menu.menu-link",
            "mega-menu.menu-section",
            "mega-menu.menu-teaser",
            "plan-item.ingredient-item",
            "plan-item.recipe-item",
            "shared.ingredient-item",
        ]

    def test_retrieve_component(self, api_client):
        """GET /api/mealcms/components/{uid}/ returns the schema."""
        response = api_client.get("/api/mealcms/components/shared.ingredient-item/")

        assert response.status_code == 200
        assert response.data["displayName"] == "Ingredient Amount"
        assert response.data["category"] == "shared"
        assert response.data["collectionName"] == "components_shared_ingredient_items"
        assert response.data["requiredAttributes"] == ["quantity", "unit"]
        assert response.data["attributes"]["required"] == {"type": "boolean", "default": True}

    def test_retrieve_unknown_component(self, api_client):
        response = api_client.get("/api/mealcms/components/shared.unknown/")

        assert response.status_code == 404

    def test_validate_valid_component(self, api_client):
        """POST /api/mealcms/components/{uid}/validate/ accepts a good record."""
        response = api_client.post(
            "/api/mealcms/components/shared.ingredient-item/validate/",
            {"quantity": "2.5", "unit": "kg"},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["valid"] is True
        assert response.data["data"]["unit"] == "kg"
        assert response.data["data"]["required"] is True

    def test_validate_invalid_component(self, api_client):
        response = api_client.post(
            "/api/mealcms/components/shared.ingredient-item/validate/",
            {"unit": "stone"},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["valid"] is False
        assert set(response.data["errors"]) == {"quantity", "unit"}

    def test_validate_unknown_component(self, api_client):
        response = api_client.post(
            "/api/mealcms/components/shared.unknown/validate/", {}, format="json"
        )

        assert response.status_code == 404

    def test_validate_against_unresolved_component(self, api_client):
        """A schema nesting an unregistered component answers 400, not 500."""
        reg = SchemaRegistry()
        reg.register(
            ComponentSchema(
                uid="shared.card",
                display_name="card",
                attributes={"seo": Attribute.component("shared.seo")},
            )
        )

        with mock.patch("mealcms.api.views.registry", reg):
            response = api_client.post(
                "/api/mealcms/components/shared.card/validate/", {}, format="json"
            )

        assert response.status_code == 400
        assert response.data["valid"] is False
        assert response.data["errors"]["code"] == "UNKNOWN_COMPONENT"

    def test_validate_rejects_null_link(self, api_client):
        response = api_client.post(
            "/api/mealcms/components/mega-menu.menu-section/validate/",
            {"menuLinks": [None]},
            format="json",
        )

        assert response.status_code == 400
        assert set(response.data["errors"]) == {"menuLinks"}


# ═══════════════════════════════════════════════════════════════════
# ContentTypeSchemaViewSet
# ═══════════════════════════════════════════════════════════════════


class TestContentTypeAPI:
    """Tests for content-type schema endpoints."""

    def test_list_content_types(self, api_client):
        response = api_client.get("/api/mealcms/content-types/")

        assert response.status_code == 200
        assert len(response.data) == 4

    def test_retrieve_content_type(self, api_client):
        response = api_client.get("/api/mealcms/content-types/api::recipe.recipe/")

        assert response.status_code == 200
        assert response.data["kind"] == "collectionType"
        assert response.data["pluralName"] == "recipes"
        assert response.data["draftAndPublish"] is True
        assert response.data["attributes"]["ingredients"] == {
            "type": "component",
            "component": "shared.ingredient-item",
            "repeatable": True,
        }

    def test_component_uid_is_not_a_content_type(self, api_client):
        response = api_client.get("/api/mealcms/content-types/shared.ingredient-item/")

        assert response.status_code == 404

    def test_validate_entry(self, api_client):
        response = api_client.post(
            "/api/mealcms/content-types/api::meal-prep-plan.meal-prep-plan/validate/",
            {
                "title": "Week 12",
                "recipeItems": [{"recipe": 4, "quantity": "2", "unit": "bowl"}],
                "ingredientItems": [{"ingredient": 9, "quantity": "0.5"}],
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.data["data"]["recipeItems"][0]["unit"] == "bowl"

    def test_validate_entry_missing_title(self, api_client):
        response = api_client.post(
            "/api/mealcms/content-types/api::meal-prep-plan.meal-prep-plan/validate/",
            {"recipeItems": [{"unit": "cauldron"}]},
            format="json",
        )

        assert response.status_code == 400
        assert set(response.data["errors"]) == {"title", "recipeItems"}


# ═══════════════════════════════════════════════════════════════════
# Permissions
# ═══════════════════════════════════════════════════════════════════


class TestPermissions:
    """All endpoints require authentication."""

    @pytest.mark.parametrize(
        "url",
        [
            "/api/mealcms/components/",
            "/api/mealcms/components/mega-menu.menu-link/",
            "/api/mealcms/content-types/",
        ],
    )
    def test_anonymous_rejected(self, db, url):
        response = APIClient().get(url)

        assert response.status_code in (401, 403)
