# subscriber_api/api/subscribers.py

from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from subscriber_api.api.deps import get_subscriber_service
from subscriber_api.models.subscribers import (
    ErrorOut,
    MessageOut,
    Subscriber,
    SubscriberCreate,
)
from subscriber_api.services.subscribers import SubscriberService

router = APIRouter(prefix="/api/subscribers", tags=["subscribers"])

STORE_ERROR_RESPONSE = {500: {"model": ErrorOut, "description": "Record store error"}}


@router.get(
    "/names",
    response_model=List[str],
    summary="Get all subscriber names",
    responses=STORE_ERROR_RESPONSE,
)
def list_subscriber_names(
    service: SubscriberService = Depends(get_subscriber_service),
) -> List[str]:
    """
    Retrieve all subscriber names.
    """
    return service.list_names()


@router.get(
    "",
    response_model=List[Subscriber],
    summary="Get all subscribers",
    responses=STORE_ERROR_RESPONSE,
)
def list_subscribers(
    service: SubscriberService = Depends(get_subscriber_service),
) -> List[Subscriber]:
    """
    Retrieve all subscribers (ID, name and subscribedChannel).
    """
    return service.list_subscribers()


@router.get(
    "/{subscriber_id}",
    response_model=Subscriber,
    summary="Get a subscriber by ID",
    responses={
        404: {"model": MessageOut, "description": "Subscriber not found"},
        **STORE_ERROR_RESPONSE,
    },
)
def get_subscriber(
    subscriber_id: str,
    service: SubscriberService = Depends(get_subscriber_service),
) -> Subscriber:
    """
    Retrieve a subscriber by their unique ID.
    """
    return service.get_subscriber(subscriber_id)


@router.post(
    "",
    response_model=Subscriber,
    status_code=201,
    summary="Create a new subscriber",
    responses={
        400: {"model": MessageOut, "description": "Missing required fields"},
        500: {"model": ErrorOut, "description": "Error creating subscriber"},
    },
)
def create_subscriber(
    payload: Optional[SubscriberCreate] = Body(default=None),
    service: SubscriberService = Depends(get_subscriber_service),
) -> Subscriber:
    """
    Add a new subscriber with name and subscribed channel.
    """
    if payload is None:
        payload = SubscriberCreate()
    return service.create_subscriber(payload.name, payload.subscribed_channel)
