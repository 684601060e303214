from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from filmlibrary.models import models, schemas


class ActorStorage:
    def __init__(self, db: Session):
        self.db = db

    def create(self, dto: schemas.ActorCreate) -> None:
        a = models.Actor(actor_name=dto.actor_name, gender=dto.gender, date_of_birth=dto.date_of_birth.date())
        try:
            self.db.add(a)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def update(self, dto: schemas.Actor) -> None:
        try:
            self.db.execute(
                update(models.Actor)
                .where(models.Actor.actor_id == dto.actor_id)
                .values(actor_name=dto.actor_name, gender=dto.gender, date_of_birth=dto.date_of_birth.date())
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def delete(self, dto: schemas.ActorDelete) -> None:
        try:
            self.db.execute(delete(models.MovieActor).where(models.MovieActor.actor_id == dto.actor_id))
            self.db.execute(delete(models.Actor).where(models.Actor.actor_id == dto.actor_id))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def get_list(self) -> List[schemas.ActorWithMovie]:
        """Actors joined with the titles of the movies they play in, one row per pair."""
        stmt = (
            select(models.Actor.actor_name, models.Actor.gender, models.Actor.date_of_birth, models.Movie.movie_title)
            .join(models.MovieActor, models.MovieActor.actor_id == models.Actor.actor_id)
            .join(models.Movie, models.Movie.movie_id == models.MovieActor.movie_id)
        )
        return [schemas.ActorWithMovie(**row._mapping) for row in self.db.execute(stmt)]
