"""
Meal CMS Service - Thin wrapper over the schema registry.

Usage:
    from mealcms import cms, SchemaError

    cms.get("shared.ingredient-item").required_attributes()
    # ['quantity', 'unit']

    data = cms.validate("shared.ingredient-item", {"quantity": "2.5", "unit": "kg"})
    data["required"]  # True (default filled in)

    try:
        cms.validate("shared.ingredient-item", {"unit": "kg"})
    except SchemaError as e:
        e.details["errors"]  # {'quantity': ['This field is required.']}
"""

import logging

from mealcms.exceptions import SchemaError
from mealcms.results import CheckResult
from mealcms.schema import registry

logger = logging.getLogger(__name__)


class ContentSchema:
    """
    Main API for Meal CMS (thin wrapper).

    Schemas live in the registry; validation is done by the DRF serializers
    in mealcms.api.serializers.
    """

    @classmethod
    def get(cls, uid: str):
        """Component or content-type schema by uid."""
        return registry.get(uid)

    @classmethod
    def validate(cls, uid: str, data: dict, partial: bool = False) -> dict:
        """
        Validate a record against the schema registered under uid.

        Returns:
            Validated data, with defaults filled in and values of hidden
            conditional attributes dropped.

        Raises:
            SchemaError: UNKNOWN_SCHEMA, or INVALID_DATA with the field errors
        """
        from mealcms.api.serializers import record_serializer_for

        schema = registry.get(uid)
        serializer = record_serializer_for(schema)(data=data, partial=partial)
        if not serializer.is_valid():
            logger.info(
                f"Record rejected by {uid}",
                extra={"uid": uid, "fields": sorted(serializer.errors)},
            )
            raise SchemaError("INVALID_DATA", uid=uid, errors=dict(serializer.errors))
        return dict(serializer.validated_data)

    @classmethod
    def check(cls) -> CheckResult:
        """Run the registry consistency checks."""
        return registry.check()

    @classmethod
    def export(cls) -> dict:
        """Every registered schema in CMS JSON form."""
        return registry.as_dict()
