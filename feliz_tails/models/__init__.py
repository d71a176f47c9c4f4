from feliz_tails.models.adoption_request import AdoptionRequest
from feliz_tails.models.donation_campaign import DonationCampaign
from feliz_tails.models.pet import Pet
from feliz_tails.models.review import Review
from feliz_tails.models.user import User

__all__ = [
    "AdoptionRequest",
    "DonationCampaign",
    "Pet",
    "Review",
    "User",
]
