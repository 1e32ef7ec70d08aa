from sqlalchemy.orm import Session

from src.config.database import SessionLocal
from src.models import EvaluationCriteria


def seed_evaluation_criteria(db: Session) -> None:
    # weights total 100
    criteria = [
        {"name": "Pontualidade", "weight": 40},
        {"name": "Cuidado com o veículo", "weight": 35},
        {"name": "Comunicação", "weight": 25},
    ]

    for order, item in enumerate(criteria):
        exists = db.query(EvaluationCriteria).filter_by(name=item["name"]).first()
        if not exists:
            db.add(EvaluationCriteria(
                name=item["name"],
                weight=item["weight"],
                penalty_leve=10,
                penalty_medio=50,
                penalty_grave=100,
                order=order,
                is_active=True,
            ))
    db.commit()


def main():
    db = SessionLocal()
    try:
        seed_evaluation_criteria(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
