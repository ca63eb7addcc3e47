from typing import Annotated
from fastapi import Depends, Path
from sqlalchemy.orm import Session
from catalog.database import get_db, UnitOfWork
from catalog.schemas.common import MAX_ID

# Path ids outside the INTEGER range are rejected with 422 before any query
ResourceId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_unit_of_work(db: Session = Depends(get_db)) -> UnitOfWork:
    """Transaction scope for multi-step writes, bound to the request's session"""
    return UnitOfWork(db)
