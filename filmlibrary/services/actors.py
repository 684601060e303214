from typing import List

from filmlibrary.crud.actors import ActorStorage
from filmlibrary.models import schemas


class ActorService:
    def __init__(self, storage: ActorStorage):
        self.storage = storage

    def create(self, dto: schemas.ActorCreate) -> None:
        self.storage.create(dto)

    def update(self, dto: schemas.Actor) -> None:
        self.storage.update(dto)

    def delete(self, dto: schemas.ActorDelete) -> None:
        self.storage.delete(dto)

    def get_list(self) -> List[schemas.ActorWithMovie]:
        return self.storage.get_list()
