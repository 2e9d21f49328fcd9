"""
Component and content-type schemas.

ComponentSchema = reusable group of fields, uid '<category>.<name>'.
ContentTypeSchema = independently persisted entity, uid 'api::<api>.<name>'.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator

from django.db import models
from django.utils.translation import gettext_lazy as _

from mealcms.exceptions import SchemaError
from mealcms.schema.attributes import Attribute, AttributeKind

UID_SEGMENT = r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*"

COMPONENT_UID_RE = re.compile(rf"^(?P<category>{UID_SEGMENT})\.(?P<name>{UID_SEGMENT})$")
CONTENT_TYPE_UID_RE = re.compile(rf"^api::(?P<api>{UID_SEGMENT})\.(?P<name>{UID_SEGMENT})$")


class ContentKind(models.TextChoices):
    """Content-type kind."""

    COLLECTION = "collectionType", _("Collection type")
    SINGLE = "singleType", _("Single type")


@dataclass(frozen=True)
class _BaseSchema:
    uid: str
    display_name: str
    attributes: dict[str, Attribute]

    def attribute(self, name: str) -> Attribute:
        try:
            return self.attributes[name]
        except KeyError:
            raise SchemaError("UNKNOWN_ATTRIBUTE", uid=self.uid, attribute=name) from None

    def required_attributes(self) -> list[str]:
        """Names of attributes that must be supplied (required, no default)."""
        return [
            name
            for name, attr in self.attributes.items()
            if attr.required and not attr.has_default
        ]

    def attributes_of_kind(self, kind: AttributeKind) -> Iterator[tuple[str, Attribute]]:
        for name, attr in self.attributes.items():
            if attr.kind == kind:
                yield name, attr

    def _attributes_dict(self) -> dict[str, Any]:
        return {name: attr.as_dict() for name, attr in self.attributes.items()}


@dataclass(frozen=True)
class ComponentSchema(_BaseSchema):
    """
    Reusable, embeddable group of fields.

    collection_name defaults to 'components_<category>_<name>s'.
    """

    collection_name: str = ""
    description: str = ""
    icon: str = ""

    def __post_init__(self):
        match = COMPONENT_UID_RE.match(self.uid)
        if not match:
            raise SchemaError("INVALID_UID", uid=self.uid, expected="<category>.<name>")
        object.__setattr__(self, "attributes", dict(self.attributes))
        if not self.collection_name:
            collection = f"components_{match['category']}_{match['name']}s".replace("-", "_")
            object.__setattr__(self, "collection_name", collection)

    @property
    def category(self) -> str:
        return self.uid.split(".", 1)[0]

    @property
    def name(self) -> str:
        return self.uid.split(".", 1)[1]

    def as_dict(self) -> dict:
        info = {"displayName": self.display_name}
        if self.description:
            info["description"] = self.description
        if self.icon:
            info["icon"] = self.icon
        return {
            "uid": self.uid,
            "category": self.category,
            "collectionName": self.collection_name,
            "info": info,
            "attributes": self._attributes_dict(),
        }


@dataclass(frozen=True)
class ContentTypeSchema(_BaseSchema):
    """
    Top-level content type.

    Names default from the uid: 'api::meal-prep-plan.meal-prep-plan' gives
    singular 'meal-prep-plan', plural 'meal-prep-plans' and collection
    'meal_prep_plans'.
    """

    kind: ContentKind = ContentKind.COLLECTION
    singular_name: str = ""
    plural_name: str = ""
    collection_name: str = ""
    draft_and_publish: bool = True
    description: str = ""

    def __post_init__(self):
        match = CONTENT_TYPE_UID_RE.match(self.uid)
        if not match:
            raise SchemaError("INVALID_UID", uid=self.uid, expected="api::<api>.<name>")
        object.__setattr__(self, "attributes", dict(self.attributes))
        object.__setattr__(self, "kind", ContentKind(self.kind))
        if not self.singular_name:
            object.__setattr__(self, "singular_name", match["name"])
        if not self.plural_name:
            object.__setattr__(self, "plural_name", f"{self.singular_name}s")
        if not self.collection_name:
            object.__setattr__(self, "collection_name", self.plural_name.replace("-", "_"))

    @property
    def api(self) -> str:
        return CONTENT_TYPE_UID_RE.match(self.uid)["api"]

    def as_dict(self) -> dict:
        info = {
            "singularName": self.singular_name,
            "pluralName": self.plural_name,
            "displayName": self.display_name,
        }
        if self.description:
            info["description"] = self.description
        return {
            "uid": self.uid,
            "kind": self.kind.value,
            "collectionName": self.collection_name,
            "info": info,
            "options": {"draftAndPublish": self.draft_and_publish},
            "attributes": self._attributes_dict(),
        }
