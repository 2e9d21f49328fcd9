"""
Meal CMS schema layer.

- Attribute / Condition: field descriptors
- ComponentSchema / ContentTypeSchema: named groups of attributes
- SchemaRegistry: uid → schema mapping with consistency checks
- registry: process-wide registry populated at app startup
"""

from mealcms.schema.attributes import (
    Attribute,
    AttributeKind,
    Condition,
    RelationKind,
)
from mealcms.schema.registries import SchemaRegistry
from mealcms.schema.types import ComponentSchema, ContentKind, ContentTypeSchema

registry = SchemaRegistry()

__all__ = [
    "Attribute",
    "AttributeKind",
    "Condition",
    "RelationKind",
    "ComponentSchema",
    "ContentKind",
    "ContentTypeSchema",
    "SchemaRegistry",
    "registry",
]
