from sqlalchemy.orm import Session, selectinload
from typing import Optional

from src.models import User
from src.utils.utils import utc_now


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return (
            self.db.query(User)
            .options(selectinload(User.role))
            .filter(User.id == user_id)
            .first()
        )

    def get_by_email(self, email: str) -> Optional[User]:
        return (
            self.db.query(User)
            .options(selectinload(User.role))
            .filter(User.email == email)
            .first()
        )

    def mark_login(self, db_user: User) -> User:
        db_user.last_login_at = utc_now()
        self.db.commit()
        self.db.refresh(db_user)
        return db_user
