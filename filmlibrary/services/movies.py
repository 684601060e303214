from typing import List, Optional

from filmlibrary.crud.movies import MovieStorage
from filmlibrary.models import schemas


class MovieService:
    def __init__(self, storage: MovieStorage):
        self.storage = storage

    def create(self, dto: schemas.MovieCreate) -> int:
        return self.storage.create(dto)

    def update(self, dto: schemas.Movie) -> None:
        self.storage.update(dto)

    def delete(self, dto: schemas.MovieDelete) -> None:
        self.storage.delete(dto)

    def get(self, title: Optional[str] = None, actor_name: Optional[str] = None) -> schemas.MovieOut:
        return self.storage.get(title=title, actor_name=actor_name)

    def get_ordered_list(self, order: str) -> List[schemas.MovieOut]:
        return self.storage.get_ordered_list(order)
