import logging
from typing import List

from fastapi import APIRouter, Depends

from filmlibrary.core.auth import Identity, current_identity
from filmlibrary.core.errors import RequestFormatError
from filmlibrary.crud.movies import ORDER_COLUMNS
from filmlibrary.models.schemas import Movie, MovieCreate, MovieDelete, MovieOut, StatusMessage
from filmlibrary.routers.common import require_json
from filmlibrary.services.deps import get_movie_service
from filmlibrary.services.movies import MovieService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movie", tags=["movie"])

DEFAULT_ORDER = "rating"


@router.get("", response_model=MovieOut)
def get_movie(title: str = "", actor: str = "", service: MovieService = Depends(get_movie_service)):
    """Find a movie by a fragment of its title, or else of one of its actors' names."""
    if not title and not actor:
        logger.info("movie search without title or actor")
        raise RequestFormatError()
    if title:
        return service.get(title=title)
    return service.get(actor_name=actor)


@router.get("/all", response_model=List[MovieOut])
def list_movies(order: str = DEFAULT_ORDER, service: MovieService = Depends(get_movie_service)):
    """All movies, highest first by the chosen column."""
    order = order or DEFAULT_ORDER
    if order not in ORDER_COLUMNS:
        logger.info("refused movie ordering by %r", order)
        raise RequestFormatError(f"cannot order by {order!r}", data=sorted(ORDER_COLUMNS))
    return service.get_ordered_list(order)


@router.post("", status_code=201, response_model=StatusMessage, dependencies=[Depends(require_json)])
def create_movie(
    body: MovieCreate,
    identity: Identity = Depends(current_identity),
    service: MovieService = Depends(get_movie_service),
):
    movie_id = service.create(body)
    logger.info("movie %s created by %s", movie_id, identity.username)
    return StatusMessage(message="movie was created")


@router.put("", response_model=StatusMessage, dependencies=[Depends(require_json)])
def update_movie(
    body: Movie,
    identity: Identity = Depends(current_identity),
    service: MovieService = Depends(get_movie_service),
):
    service.update(body)
    logger.info("movie %s updated by %s", body.movie_id, identity.username)
    return StatusMessage(message="movie was updated")


@router.delete("", response_model=StatusMessage, dependencies=[Depends(require_json)])
def delete_movie(
    body: MovieDelete,
    identity: Identity = Depends(current_identity),
    service: MovieService = Depends(get_movie_service),
):
    service.delete(body)
    logger.info("movie %s deleted by %s", body.movie_id, identity.username)
    return StatusMessage(message="movie was deleted")
