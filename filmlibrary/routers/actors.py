import logging
from typing import List

from fastapi import APIRouter, Depends

from filmlibrary.core.auth import Identity, current_identity
from filmlibrary.models.schemas import Actor, ActorCreate, ActorDelete, ActorWithMovie, StatusMessage
from filmlibrary.routers.common import require_json
from filmlibrary.services.actors import ActorService
from filmlibrary.services.deps import get_actor_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actor", tags=["actor"])


@router.get("", response_model=List[ActorWithMovie])
def list_actors(service: ActorService = Depends(get_actor_service)):
    """Actors together with the movies they appear in."""
    return service.get_list()


@router.post("", status_code=201, response_model=StatusMessage, dependencies=[Depends(require_json)])
def create_actor(
    body: ActorCreate,
    identity: Identity = Depends(current_identity),
    service: ActorService = Depends(get_actor_service),
):
    service.create(body)
    logger.info("actor %r created by %s", body.actor_name, identity.username)
    return StatusMessage(message="actor was created")


@router.put("", response_model=StatusMessage, dependencies=[Depends(require_json)])
def update_actor(
    body: Actor,
    identity: Identity = Depends(current_identity),
    service: ActorService = Depends(get_actor_service),
):
    service.update(body)
    logger.info("actor %s updated by %s", body.actor_id, identity.username)
    return StatusMessage(message="actor was updated")


@router.delete("", response_model=StatusMessage, dependencies=[Depends(require_json)])
def delete_actor(
    body: ActorDelete,
    identity: Identity = Depends(current_identity),
    service: ActorService = Depends(get_actor_service),
):
    service.delete(body)
    logger.info("actor %s deleted by %s", body.actor_id, identity.username)
    return StatusMessage(message="actor was deleted")
