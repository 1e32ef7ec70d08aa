from sqlalchemy.orm import Session

from .seed_user_roles import seed_roles
from .seed_users import seed_user
from .seed_evaluation_criteria import seed_evaluation_criteria


SEED_FUNCTIONS = [
    seed_roles,
    seed_user,
    seed_evaluation_criteria,
]


def seed_all(db: Session) -> None:
    """Run all seeders with the provided database session."""
    for func in SEED_FUNCTIONS:
        func(db)
