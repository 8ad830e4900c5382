from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from pwadmin.db.registry import ModelRegistry
from pwadmin.db.session import get_db


def get_registry(request: Request) -> ModelRegistry:
    return request.app.state.registry


DB = Annotated[Session, Depends(get_db)]
Registry = Annotated[ModelRegistry, Depends(get_registry)]
