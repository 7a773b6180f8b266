"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Annotated aliases keep route signatures short:

    def health(db: DbSession):
        ...

instead of:

    def health(db: Session = Depends(get_db)):
        ...
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookql.database import get_db

DbSession = Annotated[Session, Depends(get_db)]
