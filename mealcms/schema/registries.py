"""
Schema Registry.

Holds every component and content-type schema known to the project.
Populated once at startup by MealCmsConfig.ready() from the modules listed
in MEALCMS["SCHEMA_MODULES"]; each module exposes a SCHEMAS sequence.

Usage:
    from mealcms.schema import registry

    link = registry.get_component("mega-menu.menu-link")
    link.attribute("linkType").enum

    result = registry.check()
    if not result.success:
        for issue in result.issues:
            print(f"{issue.path}: {issue.message}")
"""

from __future__ import annotations

import logging
from collections import Counter
from importlib import import_module
from typing import Iterable, Iterator, Union

from mealcms.exceptions import SchemaError
from mealcms.results import CheckResult, SchemaIssue
from mealcms.schema.attributes import AttributeKind
from mealcms.schema.types import ComponentSchema, ContentTypeSchema

logger = logging.getLogger(__name__)

Schema = Union[ComponentSchema, ContentTypeSchema]


class SchemaRegistry:
    """Mapping of uid → schema, split into components and content types."""

    def __init__(self):
        self._components: dict[str, ComponentSchema] = {}
        self._content_types: dict[str, ContentTypeSchema] = {}

    # ── Registration ──

    def register(self, schema: Schema) -> Schema:
        """
        Register a schema.

        Registering an identical schema twice is a no-op; a different schema
        under an existing uid raises DUPLICATE_UID.
        """
        if isinstance(schema, ComponentSchema):
            store = self._components
        elif isinstance(schema, ContentTypeSchema):
            store = self._content_types
        else:
            raise SchemaError("INVALID_SCHEMA", type=type(schema).__name__)

        existing = self._components.get(schema.uid) or self._content_types.get(schema.uid)
        if existing is not None:
            if existing.as_dict() == schema.as_dict():
                return existing
            raise SchemaError("DUPLICATE_UID", uid=schema.uid)

        store[schema.uid] = schema
        logger.debug(f"Registered schema {schema.uid}", extra={"uid": schema.uid})
        return schema

    def autodiscover(self, module_paths: Iterable[str]) -> int:
        """Import each module and register its SCHEMAS. Returns the registry size."""
        for path in module_paths:
            module = import_module(path)
            for schema in getattr(module, "SCHEMAS", ()):
                self.register(schema)

        logger.info(
            f"Schema registry loaded with {len(self)} schemas",
            extra={
                "components": len(self._components),
                "content_types": len(self._content_types),
            },
        )
        return len(self)

    def clear(self) -> None:
        self._components.clear()
        self._content_types.clear()

    # ── Lookup ──

    def get(self, uid: str) -> Schema:
        schema = self._components.get(uid) or self._content_types.get(uid)
        if schema is None:
            raise SchemaError("UNKNOWN_SCHEMA", uid=uid)
        return schema

    def get_component(self, uid: str) -> ComponentSchema:
        try:
            return self._components[uid]
        except KeyError:
            raise SchemaError("UNKNOWN_COMPONENT", uid=uid) from None

    def get_content_type(self, uid: str) -> ContentTypeSchema:
        try:
            return self._content_types[uid]
        except KeyError:
            raise SchemaError("UNKNOWN_CONTENT_TYPE", uid=uid) from None

    def components(self) -> list[ComponentSchema]:
        return [self._components[uid] for uid in sorted(self._components)]

    def content_types(self) -> list[ContentTypeSchema]:
        return [self._content_types[uid] for uid in sorted(self._content_types)]

    def __contains__(self, uid: str) -> bool:
        return uid in self._components or uid in self._content_types

    def __len__(self) -> int:
        return len(self._components) + len(self._content_types)

    def __iter__(self) -> Iterator[Schema]:
        yield from self.components()
        yield from self.content_types()

    def as_dict(self) -> dict:
        return {
            "components": {s.uid: s.as_dict() for s in self.components()},
            "contentTypes": {s.uid: s.as_dict() for s in self.content_types()},
        }

    # ── Consistency ──

    def check(self) -> CheckResult:
        """
        Run the consistency checks over every registered schema.

        Never raises: every problem becomes a SchemaIssue.
        """
        issues: list[SchemaIssue] = []
        for schema in self:
            for name, attr in schema.attributes.items():
                issues.extend(self._check_attribute(schema, name, attr))
        issues.extend(self._find_component_cycles())
        return CheckResult(issues=issues)

    def _check_attribute(self, schema: Schema, name: str, attr) -> list[SchemaIssue]:
        issues = []

        def issue(code, message):
            issues.append(SchemaIssue(code=code, uid=schema.uid, attribute=name, message=message))

        if attr.kind == AttributeKind.RELATION and attr.target not in self._content_types:
            issue(
                "UNRESOLVED_RELATION",
                f"Relation target '{attr.target}' is not a registered content type.",
            )

        if attr.kind == AttributeKind.COMPONENT and attr.component_uid not in self._components:
            issue(
                "UNRESOLVED_COMPONENT",
                f"Component '{attr.component_uid}' is not registered.",
            )

        if attr.kind == AttributeKind.ENUMERATION:
            if not attr.enum:
                issue("EMPTY_ENUMERATION", "Enumeration declares no values.")
            duplicates = sorted(v for v, count in Counter(attr.enum).items() if count > 1)
            if duplicates:
                issue(
                    "DUPLICATE_ENUM_VALUE",
                    f"Enumeration repeats values: {', '.join(duplicates)}.",
                )
            if attr.has_default and attr.default not in attr.enum:
                issue(
                    "INVALID_DEFAULT",
                    f"Default '{attr.default}' is not one of the enumeration values.",
                )

        if (
            attr.kind == AttributeKind.BOOLEAN
            and attr.has_default
            and not isinstance(attr.default, bool)
        ):
            issue("INVALID_DEFAULT", f"Boolean default must be true or false, got {attr.default!r}.")

        if attr.condition is not None and attr.condition.field not in schema.attributes:
            issue(
                "INVALID_CONDITION",
                f"Condition refers to unknown attribute '{attr.condition.field}'.",
            )

        return issues

    def _find_component_cycles(self) -> list[SchemaIssue]:
        """Report components that (transitively) nest themselves."""
        graph = {
            uid: [
                attr.component_uid
                for _, attr in schema.attributes_of_kind(AttributeKind.COMPONENT)
                if attr.component_uid in self._components
            ]
            for uid, schema in self._components.items()
        }

        issues = []
        reported: set[frozenset] = set()
        visited: set[str] = set()

        def visit(uid: str, stack: list[str]):
            if uid in stack:
                cycle = stack[stack.index(uid):]
                key = frozenset(cycle)
                if key not in reported:
                    reported.add(key)
                    chain = " → ".join(cycle + [uid])
                    issues.append(
                        SchemaIssue(
                            code="COMPONENT_CYCLE",
                            uid=uid,
                            attribute=None,
                            message=f"Components nest into themselves: {chain}.",
                        )
                    )
                return
            if uid in visited:
                return
            stack.append(uid)
            for child in graph[uid]:
                visit(child, stack)
            stack.pop()
            visited.add(uid)

        for uid in sorted(graph):
            visit(uid, [])

        return issues
