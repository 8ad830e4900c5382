"""Conversions between Python attribute names and admin-facing names.

Columns and ORM attributes are snake_case; the admin schema exposes the
camelCase spelling (``organization_id`` <-> ``organizationId``). Both
directions use the pydantic alias generators so descriptor names match the
aliases accepted by the API request models.
"""

from __future__ import annotations

from pydantic.alias_generators import to_camel, to_snake


def underscore(name: str) -> str:
    return to_snake(name)


def camelize(name: str) -> str:
    return to_camel(name)


def entity_name(class_name: str) -> str:
    """``OrganizationMember`` -> ``organizationMember``."""
    return camelize(underscore(class_name))
