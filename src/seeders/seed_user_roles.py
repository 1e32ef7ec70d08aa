from sqlalchemy.orm import Session

from src.config.database import SessionLocal
from src.models import UserRole


def seed_roles(db: Session) -> None:
    roles = {
        "admin": "Manages users, criteria weights and every record",
        "operador": "Runs daily operations and submits driver evaluations",
        "visualizador": "Read-only access",
    }
    for name, description in roles.items():
        exists = db.query(UserRole).filter_by(role_name=name).first()
        if not exists:
            db.add(UserRole(role_name=name, description=description))
    db.commit()


def main():
    db = SessionLocal()
    try:
        seed_roles(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
