from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError

from pwadmin.api.deps import DB
from pwadmin.core.config import settings
from pwadmin.domain.enums import OrganizationMemberRole
from pwadmin.services.membership_service import (
    create_membership,
    delete_membership,
    get_membership,
    list_memberships,
    update_role,
)
from pwadmin.services.user_service import get_organization, get_user

router = APIRouter(prefix="/organization-members", tags=["organization-members"])


# -- Schemas ------------------------------------------------------------------


class MemberCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int
    organization_id: int
    role: OrganizationMemberRole = OrganizationMemberRole.member


class MemberUpdate(BaseModel):
    role: OrganizationMemberRole


# -- Helpers ------------------------------------------------------------------


def _iso(value):
    return value.isoformat() if value else None


def _member_to_dict(m):
    return {
        "id": m.id,
        "role": m.role,
        "createdAt": _iso(m.created_at),
        "updatedAt": _iso(m.updated_at),
        "userId": m.user_id,
        "organizationId": m.organization_id,
        "user": {"id": m.user.id, "username": m.user.username, "email": m.user.email},
        "organization": {
            "id": m.organization.id,
            "name": m.organization.name,
            "soloSeason": m.organization.solo_season,
        },
    }


def _not_found():
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Organization member not found",
    )


# -- Endpoints ----------------------------------------------------------------


@router.get("")
def list_all(
    db: DB,
    user_id: Annotated[int | None, Query(alias="userId")] = None,
    organization_id: Annotated[int | None, Query(alias="organizationId")] = None,
    limit: Annotated[int, Query(ge=1, le=1000)] = settings.DEFAULT_PAGE_SIZE,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    members = list_memberships(
        db, user_id=user_id, organization_id=organization_id, limit=limit, offset=offset
    )
    return [_member_to_dict(m) for m in members]


@router.get("/{member_id}")
def get_by_id(member_id: int, db: DB):
    member = get_membership(db, member_id)
    if member is None:
        raise _not_found()
    return _member_to_dict(member)


@router.post("", status_code=status.HTTP_201_CREATED)
def create(body: MemberCreate, db: DB):
    if get_user(db, body.user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if get_organization(db, body.organization_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Organization not found",
        )

    try:
        member = create_membership(
            db,
            user_id=body.user_id,
            organization_id=body.organization_id,
            role=body.role,
        )
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User is already a member of this organization",
        ) from None
    return _member_to_dict(member)


@router.patch("/{member_id}")
def change_role(member_id: int, body: MemberUpdate, db: DB):
    member = update_role(db, member_id, body.role)
    if member is None:
        raise _not_found()
    return _member_to_dict(member)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove(member_id: int, db: DB):
    if not delete_membership(db, member_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
