"""
Meal CMS Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    MEALCMS = {
        "SCHEMA_MODULES": ["mealcms.schema.definitions", "myproject.schemas"],
        "ADMIN_BOOTSTRAP": "myproject.admin.bootstrap",
    }

    # Option 2: Flat
    MEALCMS_SCHEMA_MODULES = ["mealcms.schema.definitions"]
    MEALCMS_ADMIN_BOOTSTRAP = None

All settings have sensible defaults — zero configuration required.
"""

from django.conf import settings


# ── Defaults ──

DEFAULTS = {
    "SCHEMA_MODULES": ["mealcms.schema.definitions"],
    "ADMIN_BOOTSTRAP": "mealcms.admin.bootstrap",
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a mealcms setting.

    Looks up in order:
    1. MEALCMS dict (e.g. MEALCMS = {"SCHEMA_MODULES": [...]})
    2. Flat setting (e.g. MEALCMS_SCHEMA_MODULES = [...])
    3. DEFAULTS
    """
    mealcms_dict = getattr(settings, "MEALCMS", {})
    if name in mealcms_dict:
        return mealcms_dict[name]

    flat_value = getattr(settings, f"MEALCMS_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_schema_modules() -> list[str]:
    """Return the dotted paths of the modules that declare schemas."""
    return list(get_setting("SCHEMA_MODULES") or [])


def get_admin_bootstrap():
    """
    Return the configured admin bootstrap callable, or None.

    The hook is called once at startup with the running admin site.
    """
    path = get_setting("ADMIN_BOOTSTRAP")
    if not path:
        return None

    from django.utils.module_loading import import_string

    return import_string(path)
