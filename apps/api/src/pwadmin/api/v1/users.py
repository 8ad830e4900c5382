from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError

from pwadmin.api.deps import DB
from pwadmin.services.membership_service import list_user_organizations
from pwadmin.services.user_service import register_user

router = APIRouter(prefix="/users", tags=["users"])


class RegisterRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str
    email: str
    oauth_subject: str | None = None


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: DB):
    """Create a user with its solo organization and owner membership."""
    try:
        user = register_user(
            db,
            username=body.username,
            email=body.email,
            oauth_subject=body.oauth_subject,
        )
    except IntegrityError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or subject already registered",
        ) from None

    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "gravatarUrl": user.gravatar_url,
        "organizations": [
            {"id": o.id, "name": o.name, "soloSeason": o.solo_season}
            for o in list_user_organizations(db, user.id)
        ],
    }
