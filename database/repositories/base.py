from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories share the caller's Session and never commit themselves."""

    def __init__(self, db: Session):
        self.db = db

    def _one_or_none(self, stmt):
        return self.db.execute(stmt).scalar_one_or_none()
