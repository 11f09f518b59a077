# =============================================================================
# app/routers/bookings.py - Event Booking Endpoint
# =============================================================================
# POST /api/book adds an event to the token holder's registered events.
# The token travels in the JSON body, not in an Authorization header.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import UserServiceDep, run_in_worker
from core.models.user import BookRequest, MessageResponse

router = APIRouter()


@router.post("/book", response_model=MessageResponse)
async def book_event(body: BookRequest, service: UserServiceDep) -> MessageResponse:
    """
    Book an event for the logged-in user.

    Booking the same event twice succeeds both times and stores it once.
    The response does not include the updated event list.

    Raises:
        401: If the token is invalid or expired
    """
    await run_in_worker(service.book, body.token, body.event_id)
    return MessageResponse(message="Registered Successfully")
