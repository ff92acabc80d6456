from pydantic import EmailStr, Field

from villa.contact.domain.repository import ContactDetails
from villa.shared.utils import ApiModel


class CreateContactRequest(ApiModel):
    """問い合わせリクエストモデル"""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=5000)

    def to_details(self) -> ContactDetails:
        return {"name": self.name, "email": str(self.email), "message": self.message}
