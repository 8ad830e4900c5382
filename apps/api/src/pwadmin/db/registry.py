from __future__ import annotations

import logging
from collections.abc import Iterator

from sqlalchemy import exc as sa_exc
from sqlalchemy import inspect
from sqlalchemy.orm import configure_mappers

from pwadmin.db.base import Base
from pwadmin.db.descriptors import EntityDescriptor, describe_entity
from pwadmin.db.naming import entity_name

logger = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    pass


class UnknownEntityError(RegistryError, KeyError):
    pass


class ModelRegistry:
    """Explicit set of entities known to the admin backend.

    Built in two phases: ``register`` every model, then ``finalize`` once.
    Finalizing checks that each foreign key and relationship points at a
    registered entity, configures the ORM mappers and freezes the registry.
    Lookups are only served by a finalized registry.
    """

    def __init__(self) -> None:
        self._models: dict[str, type[Base]] = {}
        self._descriptors: dict[str, EntityDescriptor] = {}
        self._finalized = False

    # -- Phase 1 ---------------------------------------------------------------

    def register(self, model: type[Base], *, name: str | None = None) -> type[Base]:
        if self._finalized:
            raise RegistryError(f"registry is finalized, cannot register {model.__name__}")
        name = name or entity_name(model.__name__)
        if name in self._models:
            raise RegistryError(f"entity {name!r} is already registered")
        self._models[name] = model
        logger.debug("registered entity %s -> %s", name, model.__tablename__)
        return model

    # -- Phase 2 ---------------------------------------------------------------

    def finalize(self) -> ModelRegistry:
        if self._finalized:
            return self

        names_by_model = {model: name for name, model in self._models.items()}
        tables = {model.__tablename__ for model in self._models.values()}

        for name, model in self._models.items():
            for fk in model.__table__.foreign_keys:
                target_table = fk.target_fullname.rsplit(".", 1)[0]
                if target_table not in tables:
                    raise RegistryError(
                        f"{name}.{fk.parent.name} references unregistered table {target_table!r}"
                    )

        try:
            configure_mappers()
        except sa_exc.InvalidRequestError as e:
            raise RegistryError(f"cannot resolve relationships: {e}") from e

        for name, model in self._models.items():
            for rel in inspect(model).relationships:
                if rel.mapper.class_ not in names_by_model:
                    raise RegistryError(
                        f"{name}.{rel.key} targets unregistered model {rel.mapper.class_.__name__}"
                    )

        self._descriptors = {
            name: describe_entity(model, name, names_by_model)
            for name, model in self._models.items()
        }
        self._finalized = True
        logger.info("model registry finalized with %d entities", len(self._models))
        return self

    @property
    def finalized(self) -> bool:
        return self._finalized

    # -- Lookups ---------------------------------------------------------------

    def _require_finalized(self) -> None:
        if not self._finalized:
            raise RegistryError("registry is not finalized")

    def model(self, name: str) -> type[Base]:
        self._require_finalized()
        try:
            return self._models[name]
        except KeyError:
            raise UnknownEntityError(name) from None

    def descriptor(self, name: str) -> EntityDescriptor:
        self._require_finalized()
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownEntityError(name) from None

    def descriptors(self) -> list[EntityDescriptor]:
        self._require_finalized()
        return list(self._descriptors.values())

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)
