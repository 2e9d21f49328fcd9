"""
Meal CMS system checks.

Runs SchemaRegistry.check() as part of `manage.py check`:

    python manage.py check --tag mealcms

This module is imported in apps.py to register the check.
"""

from django.core import checks

CHECK_IDS = {
    "UNRESOLVED_RELATION": "mealcms.E001",
    "UNRESOLVED_COMPONENT": "mealcms.E002",
    "EMPTY_ENUMERATION": "mealcms.E003",
    "DUPLICATE_ENUM_VALUE": "mealcms.E004",
    "INVALID_DEFAULT": "mealcms.E005",
    "COMPONENT_CYCLE": "mealcms.E006",
    "INVALID_CONDITION": "mealcms.E007",
}

HINTS = {
    "UNRESOLVED_RELATION": (
        "Declare the target content type in a module listed in MEALCMS['SCHEMA_MODULES']."
    ),
    "UNRESOLVED_COMPONENT": (
        "Declare the component in a module listed in MEALCMS['SCHEMA_MODULES']."
    ),
    "COMPONENT_CYCLE": "A component cannot contain itself, directly or through other components.",
}


@checks.register("mealcms")
def check_content_schema(app_configs=None, registry=None, **kwargs):
    """Report registry consistency issues as Django check errors."""
    if registry is None:
        from mealcms.schema import registry

    result = registry.check()
    return [
        checks.Error(
            issue.message,
            hint=HINTS.get(issue.code),
            obj=issue.path,
            id=CHECK_IDS[issue.code],
        )
        for issue in result.issues
    ]
