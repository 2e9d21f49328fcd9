"""
Meal CMS API Serializers.

Two families:
- ComponentSchemaSerializer / ContentTypeSchemaSerializer: render schemas
- record_serializer_for(schema): DRF serializer that validates a record
  (component value or content-type entry) against its schema
"""

from rest_framework import serializers

from mealcms.exceptions import SchemaError
from mealcms.schema import AttributeKind, registry as default_registry


# ── Schema representation ──


class _SchemaSerializer(serializers.Serializer):
    uid = serializers.CharField(read_only=True)
    displayName = serializers.CharField(source="display_name", read_only=True)
    collectionName = serializers.CharField(source="collection_name", read_only=True)
    attributes = serializers.SerializerMethodField()
    requiredAttributes = serializers.SerializerMethodField()

    def get_attributes(self, obj) -> dict:
        return obj.as_dict()["attributes"]

    def get_requiredAttributes(self, obj) -> list[str]:
        return obj.required_attributes()


class ComponentSchemaSerializer(_SchemaSerializer):
    """Serializer for ComponentSchema."""

    category = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    icon = serializers.CharField(read_only=True)


class ContentTypeSchemaSerializer(_SchemaSerializer):
    """Serializer for ContentTypeSchema."""

    kind = serializers.CharField(read_only=True)
    singularName = serializers.CharField(source="singular_name", read_only=True)
    pluralName = serializers.CharField(source="plural_name", read_only=True)
    draftAndPublish = serializers.BooleanField(source="draft_and_publish", read_only=True)
    description = serializers.CharField(read_only=True)


# ── Record validation ──


class RecordSerializer(serializers.Serializer):
    """
    Base serializer for records of a schema.

    Fields are built from `schema` in get_fields(), so attribute names never
    clash with Serializer attributes (e.g. an attribute called "required").
    """

    schema = None
    registry = default_registry

    def get_fields(self):
        return {
            name: build_field(attr, self.registry)
            for name, attr in self.schema.attributes.items()
        }

    def validate(self, attrs):
        # Drop values of attributes whose visibility condition does not hold.
        # A partial update that omits the controlling field keeps its values.
        partial = getattr(self.root, "partial", False)
        for name, attr in self.schema.attributes.items():
            if attr.condition is None:
                continue
            if partial and attr.condition.field not in attrs:
                continue
            if not attr.condition.holds(attrs):
                attrs.pop(name, None)
        return attrs


def _field_options(attr) -> dict:
    if attr.has_default:
        return {"required": False, "default": attr.default}
    if attr.required:
        return {"required": True}
    return {"required": False, "allow_null": True}


def build_field(attr, registry=default_registry) -> serializers.Field:
    """Map one attribute to a DRF field."""
    options = _field_options(attr)
    kind = attr.kind

    if kind == AttributeKind.STRING:
        return serializers.CharField(allow_blank=not attr.required, **options)

    if kind == AttributeKind.INTEGER:
        return serializers.IntegerField(**options)

    if kind == AttributeKind.DECIMAL:
        return serializers.DecimalField(max_digits=None, decimal_places=None, **options)

    if kind == AttributeKind.BOOLEAN:
        return serializers.BooleanField(**options)

    if kind == AttributeKind.BLOCKS:
        return serializers.ListField(child=serializers.DictField(), **options)

    if kind == AttributeKind.ENUMERATION:
        return serializers.ChoiceField(choices=list(attr.enum), **options)

    if kind in (AttributeKind.RELATION, AttributeKind.MEDIA):
        if attr.is_to_many:
            return serializers.ListField(
                child=serializers.IntegerField(min_value=1),
                allow_empty=not attr.required,
                **options,
            )
        return serializers.IntegerField(min_value=1, **options)

    if kind == AttributeKind.COMPONENT:
        serializer_class = record_serializer_for(
            registry.get_component(attr.component_uid), registry
        )
        if attr.repeatable:
            # Only the list itself may be null, never its items.
            return serializers.ListSerializer(
                child=serializer_class(), allow_empty=not attr.required, **options
            )
        return serializer_class(**options)

    raise SchemaError("INVALID_ATTRIBUTE", kind=kind)


def record_serializer_for(schema, registry=default_registry) -> type[RecordSerializer]:
    """
    Build the record serializer class for a schema.

    Required attributes without a default are required fields; attributes
    with a default are filled in when absent.
    """
    parts = schema.uid.replace("::", "-").replace(".", "-").split("-")
    name = "".join(part.capitalize() for part in parts)
    return type(
        f"{name}RecordSerializer",
        (RecordSerializer,),
        {"schema": schema, "registry": registry},
    )
