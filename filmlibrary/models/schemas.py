from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    username: str
    password: str


class SessionUser(BaseModel):
    username: str
    is_admin: bool = False


class ActorCreate(BaseModel):
    actor_name: str
    gender: str
    date_of_birth: datetime


class Actor(ActorCreate):
    actor_id: int


class ActorDelete(BaseModel):
    actor_id: int


class ActorWithMovie(BaseModel):
    actor_name: str
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    movie_title: str


class MovieCreate(BaseModel):
    movie_title: str
    description: str = ""
    release_date: datetime
    rating: int = Field(0, ge=0, le=255)
    actors: List[int] = Field(default_factory=list)


class Movie(MovieCreate):
    movie_id: int


class MovieDelete(BaseModel):
    movie_id: int


class MovieOut(BaseModel):
    movie_title: str
    description: Optional[str] = None
    release_date: Optional[date] = None
    rating: Optional[int] = None


class StatusMessage(BaseModel):
    status: str = "OK"
    message: str


class ErrorMessage(BaseModel):
    error: bool = True
    message: str
    data: Optional[Any] = None
