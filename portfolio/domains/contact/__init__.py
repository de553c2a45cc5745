from portfolio.domains.contact.entities import ContactMessage
from portfolio.domains.contact.schemas import ContactResponse, ContactSubmission
from portfolio.domains.contact.services import ContactService

__all__ = ["ContactMessage", "ContactResponse", "ContactSubmission", "ContactService"]
