# subscriber_api/api/deps.py

from fastapi import Request

from subscriber_api.services.subscribers import SubscriberService


def get_subscriber_service(request: Request) -> SubscriberService:
    """Return the service built once by ``create_app``."""
    return request.app.state.subscriber_service
