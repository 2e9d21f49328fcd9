"""
Attribute descriptors.

An Attribute describes one field of a component or content type: its kind,
whether it is required, its default, and the kind-specific options
(enumeration values, relation target, nested component, media types).

Usage:
    from mealcms.schema import Attribute, Condition

    Attribute.decimal(required=True)
    Attribute.enumeration(["g", "kg", "ml"], required=True)
    Attribute.relation("manyToOne", "api::ingredient.ingredient")
    Attribute.component("mega-menu.menu-link", repeatable=True)
    Attribute.string(condition=Condition("linkType", "custom-url"))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from django.db import models
from django.utils.translation import gettext_lazy as _

from mealcms.exceptions import SchemaError


class AttributeKind(models.TextChoices):
    """Semantic type of an attribute."""

    STRING = "string", _("String")
    INTEGER = "integer", _("Integer")
    DECIMAL = "decimal", _("Decimal")
    BOOLEAN = "boolean", _("Boolean")
    BLOCKS = "blocks", _("Rich text (blocks)")
    ENUMERATION = "enumeration", _("Enumeration")
    RELATION = "relation", _("Relation")
    COMPONENT = "component", _("Component")
    MEDIA = "media", _("Media")


class RelationKind(models.TextChoices):
    """Cardinality of a relation, seen from the owning side."""

    ONE_TO_ONE = "oneToOne", _("One to one")
    ONE_TO_MANY = "oneToMany", _("One to many")
    MANY_TO_ONE = "manyToOne", _("Many to one")
    MANY_TO_MANY = "manyToMany", _("Many to many")


TO_MANY_RELATIONS = frozenset({RelationKind.ONE_TO_MANY, RelationKind.MANY_TO_MANY})

MEDIA_TYPES = ("images", "files", "videos", "audios")


@dataclass(frozen=True)
class Condition:
    """Attribute is visible only while sibling `field` equals `equals`."""

    field: str
    equals: Any

    def holds(self, values: dict) -> bool:
        return values.get(self.field) == self.equals

    def as_dict(self) -> dict:
        return {"visible": {"==": [{"var": self.field}, self.equals]}}


@dataclass(frozen=True)
class Attribute:
    """
    Field descriptor.

    Prefer the classmethod constructors over calling this directly; they
    validate the kind-specific options.
    """

    kind: AttributeKind
    required: bool = False
    default: Any = None
    enum: tuple[str, ...] = ()
    relation_type: RelationKind | None = None
    target: str | None = None
    component_uid: str | None = None
    repeatable: bool = False
    multiple: bool = False
    allowed_types: tuple[str, ...] = ()
    condition: Condition | None = None

    # ── Constructors ──

    @classmethod
    def string(cls, required=False, default=None, condition=None) -> Attribute:
        return cls(AttributeKind.STRING, required=required, default=default, condition=condition)

    @classmethod
    def integer(cls, required=False, default=None, condition=None) -> Attribute:
        return cls(AttributeKind.INTEGER, required=required, default=default, condition=condition)

    @classmethod
    def decimal(cls, required=False, default=None, condition=None) -> Attribute:
        return cls(AttributeKind.DECIMAL, required=required, default=default, condition=condition)

    @classmethod
    def boolean(cls, required=False, default=None, condition=None) -> Attribute:
        return cls(AttributeKind.BOOLEAN, required=required, default=default, condition=condition)

    @classmethod
    def blocks(cls, required=False, condition=None) -> Attribute:
        return cls(AttributeKind.BLOCKS, required=required, condition=condition)

    @classmethod
    def enumeration(
        cls, values: Iterable[str], required=False, default=None, condition=None
    ) -> Attribute:
        """
        Enumerated string.

        Empty or repeated values are accepted here and reported by
        SchemaRegistry.check().
        """
        return cls(
            AttributeKind.ENUMERATION,
            required=required,
            default=default,
            enum=tuple(values),
            condition=condition,
        )

    @classmethod
    def relation(cls, kind: str, target: str, required=False, condition=None) -> Attribute:
        if kind not in RelationKind.values:
            raise SchemaError("INVALID_ATTRIBUTE", relation=kind, allowed=RelationKind.values)
        return cls(
            AttributeKind.RELATION,
            required=required,
            relation_type=RelationKind(kind),
            target=target,
            condition=condition,
        )

    @classmethod
    def component(cls, uid: str, repeatable=False, required=False, condition=None) -> Attribute:
        return cls(
            AttributeKind.COMPONENT,
            required=required,
            component_uid=uid,
            repeatable=repeatable,
            condition=condition,
        )

    @classmethod
    def media(
        cls, allowed_types: Iterable[str] = MEDIA_TYPES, multiple=False, required=False, condition=None
    ) -> Attribute:
        allowed = tuple(allowed_types)
        unknown = [t for t in allowed if t not in MEDIA_TYPES]
        if unknown:
            raise SchemaError("INVALID_ATTRIBUTE", allowed_types=unknown, allowed=list(MEDIA_TYPES))
        return cls(
            AttributeKind.MEDIA,
            required=required,
            multiple=multiple,
            allowed_types=allowed,
            condition=condition,
        )

    # ── Properties ──

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_to_many(self) -> bool:
        """True when the stored value is a list of references."""
        if self.kind == AttributeKind.RELATION:
            return self.relation_type in TO_MANY_RELATIONS
        if self.kind == AttributeKind.COMPONENT:
            return self.repeatable
        if self.kind == AttributeKind.MEDIA:
            return self.multiple
        return False

    def as_dict(self) -> dict:
        """Render the attribute in the CMS JSON schema form."""
        data: dict[str, Any] = {"type": self.kind.value}

        if self.kind == AttributeKind.ENUMERATION:
            data["enum"] = list(self.enum)
        elif self.kind == AttributeKind.RELATION:
            data["relation"] = self.relation_type.value
            data["target"] = self.target
        elif self.kind == AttributeKind.COMPONENT:
            data["component"] = self.component_uid
            data["repeatable"] = self.repeatable
        elif self.kind == AttributeKind.MEDIA:
            data["multiple"] = self.multiple
            data["allowedTypes"] = list(self.allowed_types)

        if self.required:
            data["required"] = True
        if self.has_default:
            data["default"] = self.default
        if self.condition is not None:
            data["conditions"] = self.condition.as_dict()
        return data
