"""
Tests for attribute descriptors and schema types (mealcms.schema).
"""

import pytest

from mealcms.exceptions import SchemaError
from mealcms.schema import (
    Attribute,
    AttributeKind,
    ComponentSchema,
    Condition,
    ContentKind,
    ContentTypeSchema,
    RelationKind,
)


# ═══════════════════════════════════════════════════════════════════
# Attribute
# ═══════════════════════════════════════════════════════════════════


class TestAttribute:
    """Tests for Attribute constructors and as_dict()."""

    def test_enumeration_as_dict(self):
        attr = Attribute.enumeration(["serving", "bowl", "plate"], required=True)

        assert attr.kind == AttributeKind.ENUMERATION
        assert attr.as_dict() == {
            "type": "enumeration",
            "enum": ["serving", "bowl", "plate"],
            "required": True,
        }

    def test_relation_as_dict(self):
        attr = Attribute.relation("manyToOne", "api::ingredient.ingredient")

        assert attr.relation_type == RelationKind.MANY_TO_ONE
        assert attr.as_dict() == {
            "type": "relation",
            "relation": "manyToOne",
            "target": "api::ingredient.ingredient",
        }

    def test_invalid_relation_kind_raises(self):
        with pytest.raises(SchemaError) as exc:
            Attribute.relation("oneToFew", "api::recipe.recipe")

        assert exc.value.code == "INVALID_ATTRIBUTE"

    def test_component_as_dict(self):
        attr = Attribute.component("mega-menu.menu-link", repeatable=True)

        assert attr.as_dict() == {
            "type": "component",
            "component": "mega-menu.menu-link",
            "repeatable": True,
        }

    def test_media_as_dict(self):
        attr = Attribute.media(["images"])

        assert attr.as_dict() == {
            "type": "media",
            "multiple": False,
            "allowedTypes": ["images"],
        }

    def test_invalid_media_type_raises(self):
        with pytest.raises(SchemaError) as exc:
            Attribute.media(["pictures"])

        assert exc.value.code == "INVALID_ATTRIBUTE"
        assert exc.value.details["allowed_types"] == ["pictures"]

    def test_boolean_default(self):
        attr = Attribute.boolean(default=True)

        assert attr.has_default
        assert attr.as_dict() == {"type": "boolean", "default": True}

    def test_false_default_is_a_default(self):
        """False is a real default; only None means 'no default'."""
        assert Attribute.boolean(default=False).has_default
        assert not Attribute.boolean().has_default

    def test_condition_as_dict(self):
        attr = Attribute.string(condition=Condition("linkType", "custom-url"))

        assert attr.as_dict()["conditions"] == {
            "visible": {"==": [{"var": "linkType"}, "custom-url"]}
        }

    def test_condition_holds(self):
        condition = Condition("linkType", "recipe")

        assert condition.holds({"linkType": "recipe"})
        assert not condition.holds({"linkType": "ingredient"})
        assert not condition.holds({})

    @pytest.mark.parametrize(
        "attr, expected",
        [
            (Attribute.relation("oneToOne", "api::recipe.recipe"), False),
            (Attribute.relation("manyToMany", "api::recipe.recipe"), True),
            (Attribute.component("shared.ingredient-item", repeatable=True), True),
            (Attribute.media(["images"], multiple=True), True),
            (Attribute.string(), False),
        ],
    )
    def test_is_to_many(self, attr, expected):
        assert attr.is_to_many is expected


# ═══════════════════════════════════════════════════════════════════
# ComponentSchema / ContentTypeSchema
# ═══════════════════════════════════════════════════════════════════


class TestComponentSchema:
    """Tests for ComponentSchema naming and lookup."""

    def test_collection_name_derived_from_uid(self):
        schema = ComponentSchema(uid="mega-menu.menu-link", display_name="menu-link", attributes={})

        assert schema.category == "mega-menu"
        assert schema.name == "menu-link"
        assert schema.collection_name == "components_mega_menu_menu_links"

    def test_explicit_collection_name_kept(self):
        schema = ComponentSchema(
            uid="shared.seo",
            display_name="seo",
            attributes={},
            collection_name="components_shared_seo",
        )

        assert schema.collection_name == "components_shared_seo"

    @pytest.mark.parametrize("uid", ["menu-link", "Mega.Link", "api::recipe.recipe", "a.b.c"])
    def test_invalid_uid_raises(self, uid):
        with pytest.raises(SchemaError) as exc:
            ComponentSchema(uid=uid, display_name="x", attributes={})

        assert exc.value.code == "INVALID_UID"

    def test_attribute_lookup(self):
        quantity = Attribute.decimal(required=True)
        schema = ComponentSchema(
            uid="plan-item.ingredient-item",
            display_name="ingredient-item",
            attributes={"quantity": quantity},
        )

        assert schema.attribute("quantity") is quantity

    def test_unknown_attribute_raises(self):
        schema = ComponentSchema(uid="shared.seo", display_name="seo", attributes={})

        with pytest.raises(SchemaError) as exc:
            schema.attribute("title")

        assert exc.value.code == "UNKNOWN_ATTRIBUTE"

    def test_required_attributes_skip_defaults(self):
        schema = ComponentSchema(
            uid="shared.flags",
            display_name="flags",
            attributes={
                "name": Attribute.string(required=True),
                "enabled": Attribute.boolean(required=True, default=True),
                "notes": Attribute.blocks(),
            },
        )

        assert schema.required_attributes() == ["name"]

    def test_attributes_are_copied(self):
        attributes = {"title": Attribute.string()}
        schema = ComponentSchema(uid="shared.seo", display_name="seo", attributes=attributes)
        attributes["extra"] = Attribute.string()

        assert list(schema.attributes) == ["title"]


class TestContentTypeSchema:
    """Tests for ContentTypeSchema naming."""

    def test_names_derived_from_uid(self):
        schema = ContentTypeSchema(
            uid="api::meal-prep-plan.meal-prep-plan",
            display_name="Meal Prep Plan",
            attributes={},
        )

        assert schema.api == "meal-prep-plan"
        assert schema.singular_name == "meal-prep-plan"
        assert schema.plural_name == "meal-prep-plans"
        assert schema.collection_name == "meal_prep_plans"
        assert schema.kind == ContentKind.COLLECTION

    def test_single_type_as_dict(self):
        schema = ContentTypeSchema(
            uid="api::mega-menu.mega-menu",
            display_name="Mega Menu",
            kind="singleType",
            attributes={"title": Attribute.string()},
            draft_and_publish=False,
        )

        data = schema.as_dict()
        assert data["kind"] == "singleType"
        assert data["options"] == {"draftAndPublish": False}
        assert data["info"]["pluralName"] == "mega-menus"
        assert data["attributes"] == {"title": {"type": "string"}}

    def test_invalid_uid_raises(self):
        with pytest.raises(SchemaError) as exc:
            ContentTypeSchema(uid="recipe.recipe", display_name="Recipe", attributes={})

        assert exc.value.code == "INVALID_UID"
