from sqlalchemy.orm import Session
import bcrypt

from src.config.config import get_env
from src.config.database import SessionLocal
from src.config.logger import get_logger
from src.models import User, UserRole

logger = get_logger(__name__)


def seed_user(db: Session) -> None:
    email = get_env("SEED_ADMIN_EMAIL")
    password = get_env("SEED_ADMIN_PASSWORD")
    if not email or not password:
        logger.warning("SEED_ADMIN_EMAIL / SEED_ADMIN_PASSWORD not set; skipping admin user")
        return

    if db.query(User).filter_by(email=email).first():
        return

    role = db.query(UserRole).filter_by(role_name="admin").first()
    if not role:
        role = UserRole(role_name="admin")
        db.add(role)
        db.commit()
        db.refresh(role)

    password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")
    db.add(User(email=email, full_name="Administrador", password_hash=password_hash, role_id=role.id))
    db.commit()
    logger.info("Seeded admin user %s", email)


def main():
    db = SessionLocal()
    try:
        seed_user(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
