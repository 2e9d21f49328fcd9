"""
Django Meal CMS - Content schema for a meal-prep headless CMS.

Declares the components and content types (ingredients, recipes, meal-prep
plans, mega-menu navigation) that the site's storage, API and admin forms
are derived from.

Usage:
    from mealcms import cms, SchemaError

    link = cms.get("mega-menu.menu-link")
    link.attribute("linkType").enum
    # ('recipe', 'meal-plan', 'meal-slot', 'ingredient', 'custom-url')

    result = cms.check()
    if not result.success:
        for issue in result.issues:
            print(f"{issue.path}: {issue.message}")

    cms.validate("plan-item.recipe-item", {"recipe": 12, "unit": "bowl"})
"""

from mealcms.exceptions import SchemaError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("cms", "ContentSchema"):
        from mealcms.service import ContentSchema

        return ContentSchema
    if name == "CheckResult":
        from mealcms.results import CheckResult

        return CheckResult
    if name == "SchemaIssue":
        from mealcms.results import SchemaIssue

        return SchemaIssue
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["cms", "ContentSchema", "SchemaError", "CheckResult", "SchemaIssue"]
__version__ = "0.1.0"
