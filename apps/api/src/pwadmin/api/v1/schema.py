from fastapi import APIRouter, HTTPException, status

from pwadmin.api.deps import Registry
from pwadmin.db.descriptors import EntityDescriptor
from pwadmin.db.registry import UnknownEntityError

router = APIRouter(prefix="/schema", tags=["schema"])


@router.get("", response_model=list[EntityDescriptor])
def list_entities(registry: Registry):
    """Entity descriptors read by the admin UI generator."""
    return registry.descriptors()


@router.get("/{entity}", response_model=EntityDescriptor)
def get_entity(entity: str, registry: Registry):
    try:
        return registry.descriptor(entity)
    except UnknownEntityError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown entity '{entity}'",
        ) from None
