from datetime import datetime, timezone
from sqlmodel import Session, SQLModel


class BaseRepository:
    """Shared session handling. Repositories built on the same session share its transaction."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, obj: SQLModel, commit: bool = True) -> SQLModel:
        """Full-record write. With ``commit=False`` the change is only staged."""
        if hasattr(obj, "updated_at"):
            obj.updated_at = datetime.now(timezone.utc)
        self.session.add(obj)
        if commit:
            self.commit()
            self.session.refresh(obj)
        return obj

    def commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
