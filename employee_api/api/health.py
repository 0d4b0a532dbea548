from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from employee_api.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness plus a round trip to the employee database."""
    db.execute(text("SELECT 1"))
    return {"status": "ok", "database": db.get_bind().dialect.name}
