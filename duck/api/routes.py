import logging

from fastapi import APIRouter, Depends, Path, status

from duck.api.deps import get_store
from duck.api.errors import DuckMissing, StoreFailure
from duck.schemas import Error, NewRubberDuck, RubberDuck
from duck.store.base import DuckStore
from duck.store.errors import DuckNotFound, StoreUnavailable

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ducks", tags=["Ducks"])

# Largest id a 64-bit integer primary key can hold
MAX_DUCK_ID = 2**63 - 1

ERROR_RESPONSES = {
    400: {"model": Error, "description": "Request does not match the schema"},
    500: {"model": Error, "description": "Store failure"},
}


@router.get(
    "",
    response_model=list[RubberDuck],
    responses={500: ERROR_RESPONSES[500]},
    operation_id="getDucks",
)
async def get_ducks(store: DuckStore = Depends(get_store)):
    """
    List all ducks, ascending by id.
    """
    try:
        return await store.list_ducks()
    except StoreUnavailable as e:
        logger.error(f"Listing ducks failed: {e}")
        raise StoreFailure(f"failed to get ducks: {e}")


@router.post(
    "",
    response_model=RubberDuck,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    operation_id="createDuck",
)
async def create_duck(
    duck: NewRubberDuck,
    store: DuckStore = Depends(get_store),
):
    """
    Create a duck. The body is validated before this runs.
    """
    try:
        created = await store.create_duck(duck)
    except StoreUnavailable as e:
        logger.error(f"Creating duck failed: {e}")
        raise StoreFailure(f"failed to create duck: {e}")

    logger.info(f"Created duck id={created.id}")
    return created


@router.get(
    "/{duck_id}",
    response_model=RubberDuck,
    responses={
        **ERROR_RESPONSES,
        404: {"model": Error, "description": "Unknown duck"},
    },
    operation_id="getDuck",
)
async def get_duck(
    duck_id: int = Path(..., ge=1, le=MAX_DUCK_ID, description="Duck ID"),
    store: DuckStore = Depends(get_store),
):
    """
    Get one duck by id.
    """
    try:
        return await store.get_duck(duck_id)
    except DuckNotFound:
        raise DuckMissing(duck_id)
    except StoreUnavailable as e:
        logger.error(f"Reading duck {duck_id} failed: {e}")
        raise StoreFailure(f"failed to get duck: {e}")
