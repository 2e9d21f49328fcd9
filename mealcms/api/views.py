"""
Meal CMS API ViewSets.
"""

import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from mealcms.exceptions import SchemaError
from mealcms.schema import registry
from mealcms.schema.types import UID_SEGMENT
from .serializers import (
    ComponentSchemaSerializer,
    ContentTypeSchemaSerializer,
    record_serializer_for,
)

logger = logging.getLogger(__name__)

# Lookup patterns without named groups; the router wraps them in (?P<uid>...).
COMPONENT_UID_LOOKUP = rf"{UID_SEGMENT}\.{UID_SEGMENT}"
CONTENT_TYPE_UID_LOOKUP = rf"api::{UID_SEGMENT}\.{UID_SEGMENT}"


class _SchemaViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]
    lookup_field = "uid"
    serializer_class = None

    def get_schemas(self):
        raise NotImplementedError

    def get_schema(self, uid):
        raise NotImplementedError

    def get_object(self):
        uid = self.kwargs[self.lookup_field]
        try:
            return self.get_schema(uid)
        except SchemaError as e:
            raise NotFound(e.as_dict())

    def list(self, request):
        serializer = self.serializer_class(self.get_schemas(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, uid=None):
        serializer = self.serializer_class(self.get_object())
        return Response(serializer.data)

    @action(detail=True, methods=["post"])
    def validate(self, request, uid=None):
        """
        Validate a record against the schema without storing it.

        POST /api/mealcms/<resource>/{uid}/validate/
        """
        schema = self.get_object()
        serializer = record_serializer_for(schema, registry)(data=request.data)
        try:
            valid = serializer.is_valid()
        except SchemaError as e:
            # Schema references a component missing from the registry.
            logger.warning(
                f"Cannot validate against {schema.uid}: {e}",
                extra={"uid": schema.uid, "code": e.code},
            )
            return Response(
                {"valid": False, "errors": e.as_dict()},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if not valid:
            logger.info(
                f"Record rejected by {schema.uid}",
                extra={"uid": schema.uid, "fields": sorted(serializer.errors)},
            )
            return Response(
                {"valid": False, "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response({"valid": True, "data": serializer.data})


class ComponentSchemaViewSet(_SchemaViewSet):
    """
    ViewSet for component schemas (read-only).

    list: List all components
    retrieve: Get a component by uid (e.g. mega-menu.menu-link)
    validate: Validate a component value
    """

    serializer_class = ComponentSchemaSerializer
    lookup_value_regex = COMPONENT_UID_LOOKUP

    def get_schemas(self):
        return registry.components()

    def get_schema(self, uid):
        return registry.get_component(uid)


class ContentTypeSchemaViewSet(_SchemaViewSet):
    """
    ViewSet for content-type schemas (read-only).

    list: List all content types
    retrieve: Get a content type by uid (e.g. api::recipe.recipe)
    validate: Validate an entry
    """

    serializer_class = ContentTypeSchemaSerializer
    lookup_value_regex = CONTENT_TYPE_UID_LOOKUP

    def get_schemas(self):
        return registry.content_types()

    def get_schema(self, uid):
        return registry.get_content_type(uid)
