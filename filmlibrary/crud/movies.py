import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from filmlibrary.models import models, schemas

logger = logging.getLogger(__name__)

# Column identifiers cannot be bound as parameters, so ORDER BY only ever
# sees one of these.
ORDER_COLUMNS = {
    "movie_title": models.Movie.movie_title,
    "description": models.Movie.description,
    "release_date": models.Movie.release_date,
    "rating": models.Movie.rating,
}

_OUT_COLUMNS = (
    models.Movie.movie_title,
    models.Movie.description,
    models.Movie.release_date,
    models.Movie.rating,
)


class MovieStorage:
    def __init__(self, db: Session):
        self.db = db

    def _insert_actors(self, movie_id: int, actors: List[int]) -> None:
        if not actors:
            return
        # one multi-row INSERT for the whole set
        self.db.execute(
            insert(models.MovieActor).values([{"movie_id": movie_id, "actor_id": a} for a in actors])
        )

    def create(self, dto: schemas.MovieCreate) -> int:
        """Insert the movie and its actor links in a single transaction.

        Any failure rolls back both the movie row and the links, then the
        original error is re-raised.
        """
        try:
            movie_id = self.db.execute(
                insert(models.Movie)
                .values(
                    movie_title=dto.movie_title,
                    description=dto.description,
                    release_date=dto.release_date.date(),
                    rating=dto.rating,
                )
                .returning(models.Movie.movie_id)
            ).scalar_one()
            self._insert_actors(movie_id, dto.actors)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("movie %s created with %d actors", movie_id, len(dto.actors))
        return movie_id

    def update(self, dto: schemas.Movie) -> None:
        """Rewrite the scalar columns and replace the whole actor set atomically."""
        try:
            self.db.execute(
                update(models.Movie)
                .where(models.Movie.movie_id == dto.movie_id)
                .values(
                    movie_title=dto.movie_title,
                    description=dto.description,
                    release_date=dto.release_date.date(),
                    rating=dto.rating,
                )
            )
            self.db.execute(delete(models.MovieActor).where(models.MovieActor.movie_id == dto.movie_id))
            self._insert_actors(dto.movie_id, dto.actors)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def delete(self, dto: schemas.MovieDelete) -> None:
        try:
            self.db.execute(delete(models.MovieActor).where(models.MovieActor.movie_id == dto.movie_id))
            self.db.execute(delete(models.Movie).where(models.Movie.movie_id == dto.movie_id))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def get(self, title: Optional[str] = None, actor_name: Optional[str] = None) -> schemas.MovieOut:
        """First movie whose title, or failing that one of whose actors, contains the term."""
        if title:
            stmt = select(*_OUT_COLUMNS).where(func.lower(models.Movie.movie_title).contains(title.lower(), autoescape=True))
        elif actor_name:
            stmt = (
                select(*_OUT_COLUMNS)
                .join(models.MovieActor, models.MovieActor.movie_id == models.Movie.movie_id)
                .join(models.Actor, models.Actor.actor_id == models.MovieActor.actor_id)
                .where(func.lower(models.Actor.actor_name).contains(actor_name.lower(), autoescape=True))
            )
        else:
            raise ValueError("invalid search type")

        row = self.db.execute(stmt.limit(1)).first()
        if row is None:
            raise NoResultFound("no rows in result set")
        return schemas.MovieOut(**row._mapping)

    def get_ordered_list(self, order: str) -> List[schemas.MovieOut]:
        column = ORDER_COLUMNS.get(order)
        if column is None:
            raise ValueError(f"cannot order movies by {order!r}")
        stmt = select(*_OUT_COLUMNS).order_by(column.desc())
        return [schemas.MovieOut(**row._mapping) for row in self.db.execute(stmt)]
