"""
Meal CMS Exceptions.

All schema errors are wrapped in SchemaError for consistent handling.
"""

from typing import Any


def flatten_errors(errors: Any, prefix: str = "") -> dict[str, list[str]]:
    """
    Flatten nested record errors into dotted attribute paths.

    Accepts DRF serializer errors, where nested lists report per-item errors
    either as a list or as a dict keyed by item index.

        flatten_errors({"menuLinks": {1: {"linkType": ["This field is required."]}}})
        # {'menuLinks.1.linkType': ['This field is required.']}
    """
    if isinstance(errors, dict):
        flat = {}
        for key, value in errors.items():
            flat.update(flatten_errors(value, f"{prefix}.{key}" if prefix else str(key)))
        return flat
    if isinstance(errors, (list, tuple)):
        if all(isinstance(item, str) for item in errors):
            return {prefix: [str(item) for item in errors]} if errors else {}
        flat = {}
        for index, item in enumerate(errors):
            flat.update(flatten_errors(item, f"{prefix}.{index}" if prefix else str(index)))
        return flat
    return {prefix: [str(errors)]}


class SchemaError(Exception):
    """
    Base exception for all Meal CMS schema errors.

    Usage:
        raise SchemaError('UNKNOWN_COMPONENT', uid='mega-menu.menu-link')

    Attributes:
        code: Error code (UNKNOWN_COMPONENT, DUPLICATE_UID, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """INVALID_DATA errors keyed by dotted path (e.g. 'menuLinks.1.linkType')."""
        return flatten_errors(self.details.get("errors", {}))

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        if self.code == "INVALID_DATA" and "errors" in self.details:
            paths = ", ".join(sorted(self.field_errors))
            return f"SchemaError(INVALID_DATA: uid={self.details.get('uid')}, fields={paths})"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"SchemaError({self.code}: {details_str})"
        return f"SchemaError({self.code})"


# Common error codes
# INVALID_UID: uid does not follow '<category>.<name>' / 'api::<api>.<name>'
# INVALID_ATTRIBUTE: attribute descriptor built with unsupported options
# INVALID_SCHEMA: object registered is not a component or content-type schema
# DUPLICATE_UID: a different schema is already registered under the uid
# UNKNOWN_SCHEMA: no component or content type with the uid
# UNKNOWN_COMPONENT: no component with the uid
# UNKNOWN_CONTENT_TYPE: no content type with the uid
# UNKNOWN_ATTRIBUTE: schema has no attribute with the name
# INVALID_DATA: record does not conform to its schema; errors holds the field errors
