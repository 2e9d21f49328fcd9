"""
Meal CMS schema definitions.

Components:
- mega-menu.menu-link / menu-section / menu-teaser: mega-menu navigation
- plan-item.ingredient-item / recipe-item: entries of a meal-prep plan
- shared.ingredient-item: ingredient amount used by recipes

Content types:
- api::ingredient.ingredient
- api::recipe.recipe
- api::meal-prep-plan.meal-prep-plan
- api::mega-menu.mega-menu (single type)

Listed in MEALCMS["SCHEMA_MODULES"] by default.
"""

from mealcms.schema.attributes import Attribute, Condition
from mealcms.schema.types import ComponentSchema, ContentKind, ContentTypeSchema

INGREDIENT = "api::ingredient.ingredient"
RECIPE = "api::recipe.recipe"
MEAL_PREP_PLAN = "api::meal-prep-plan.meal-prep-plan"
MEGA_MENU = "api::mega-menu.mega-menu"

UNITS = ["g", "kg", "ml", "l", "tsp", "tbsp", "cup", "pcs"]
LINK_TYPES = ["recipe", "meal-plan", "meal-slot", "ingredient", "custom-url"]
SERVING_UNITS = ["serving", "bowl", "plate"]


# ── Mega menu ──

menu_link = ComponentSchema(
    uid="mega-menu.menu-link",
    display_name="menu-link",
    attributes={
        # Only the field matching linkType is kept.
        "customUrl": Attribute.string(condition=Condition("linkType", "custom-url")),
        "ingredient": Attribute.relation(
            "oneToOne", INGREDIENT, condition=Condition("linkType", "ingredient")
        ),
        "linkText": Attribute.string(),
        "linkType": Attribute.enumeration(LINK_TYPES, required=True),
        "mealPrepPlan": Attribute.relation(
            "oneToOne", MEAL_PREP_PLAN, condition=Condition("linkType", "meal-plan")
        ),
        "recipe": Attribute.relation(
            "oneToOne", RECIPE, condition=Condition("linkType", "recipe")
        ),
    },
)

menu_section = ComponentSchema(
    uid="mega-menu.menu-section",
    display_name="menu-section",
    attributes={
        "menuLinks": Attribute.component("mega-menu.menu-link", repeatable=True),
        "sectionLabel": Attribute.string(),
        "teaserColumn": Attribute.component("mega-menu.menu-teaser", repeatable=False),
    },
)

menu_teaser = ComponentSchema(
    uid="mega-menu.menu-teaser",
    display_name="menu-teaser",
    attributes={
        "image": Attribute.media(["images"]),
        "recipe": Attribute.relation("oneToOne", RECIPE),
        "title": Attribute.string(),
    },
)


# ── Plan items ──

plan_ingredient_item = ComponentSchema(
    uid="plan-item.ingredient-item",
    display_name="ingredient-item",
    attributes={
        "ingredient": Attribute.relation("oneToOne", INGREDIENT),
        "quantity": Attribute.decimal(),
    },
)

plan_recipe_item = ComponentSchema(
    uid="plan-item.recipe-item",
    display_name="recipe-item",
    attributes={
        "quantity": Attribute.decimal(),
        "recipe": Attribute.relation("oneToOne", RECIPE),
        "unit": Attribute.enumeration(SERVING_UNITS),
    },
)


# ── Shared ──

ingredient_amount = ComponentSchema(
    uid="shared.ingredient-item",
    display_name="Ingredient Amount",
    attributes={
        "baseIngredient": Attribute.relation("manyToOne", INGREDIENT),
        "notes": Attribute.blocks(),
        "price": Attribute.decimal(),
        "quantity": Attribute.decimal(required=True),
        "required": Attribute.boolean(default=True),
        "unit": Attribute.enumeration(UNITS, required=True),
    },
)


# ── Content types ──

ingredient = ContentTypeSchema(
    uid=INGREDIENT,
    display_name="Ingredient",
    attributes={
        "name": Attribute.string(required=True),
        "description": Attribute.blocks(),
        "defaultUnit": Attribute.enumeration(UNITS),
        "pricePerUnit": Attribute.decimal(),
        "image": Attribute.media(["images"]),
    },
)

recipe = ContentTypeSchema(
    uid=RECIPE,
    display_name="Recipe",
    attributes={
        "title": Attribute.string(required=True),
        "description": Attribute.blocks(),
        "servings": Attribute.integer(),
        "ingredients": Attribute.component("shared.ingredient-item", repeatable=True),
        "image": Attribute.media(["images"]),
    },
)

meal_prep_plan = ContentTypeSchema(
    uid=MEAL_PREP_PLAN,
    display_name="Meal Prep Plan",
    attributes={
        "title": Attribute.string(required=True),
        "description": Attribute.blocks(),
        "recipeItems": Attribute.component("plan-item.recipe-item", repeatable=True),
        "ingredientItems": Attribute.component("plan-item.ingredient-item", repeatable=True),
    },
)

mega_menu = ContentTypeSchema(
    uid=MEGA_MENU,
    display_name="Mega Menu",
    kind=ContentKind.SINGLE,
    attributes={
        "sections": Attribute.component("mega-menu.menu-section", repeatable=True),
    },
)


SCHEMAS = [
    menu_link,
    menu_section,
    menu_teaser,
    plan_ingredient_item,
    plan_recipe_item,
    ingredient_amount,
    ingredient,
    recipe,
    meal_prep_plan,
    mega_menu,
]
