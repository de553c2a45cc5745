from fastapi import APIRouter, Depends

from portfolio.api.deps import get_contact_service
from portfolio.domains.contact.schemas import ContactResponse, ContactSubmission
from portfolio.domains.contact.services import ContactService

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", response_model=ContactResponse)
async def submit_contact(
    submission: ContactSubmission,
    contact_service: ContactService = Depends(get_contact_service),
):
    """Приём сообщения с формы обратной связи"""
    await contact_service.submit(submission)
    return ContactResponse()
