"""Persistence contracts used by route handlers.

Handlers depend on these Protocols only; the SQLAlchemy implementations in
``feliz_tails.repositories`` are wired in through ``core.dependencies``.
"""

import uuid
from typing import Protocol

from feliz_tails.models.adoption_request import AdoptionRequest
from feliz_tails.models.donation_campaign import DonationCampaign
from feliz_tails.models.pet import Pet
from feliz_tails.models.review import Review
from feliz_tails.models.user import User
from feliz_tails.services.listing_query import ListingFilter


class UserStore(Protocol):
    async def get(self, user_id: uuid.UUID) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def list_all(self) -> list[User]: ...
    async def create(self, data: dict) -> User | None: ...
    async def set_role(self, user_id: uuid.UUID, role: str) -> User | None: ...


class ListingStore(Protocol):
    async def search(
        self, listing_filter: ListingFilter, limit: int | None = None
    ) -> list[Pet]: ...
    async def get(self, pet_id: uuid.UUID) -> Pet | None: ...
    async def find_by_name_and_owner(self, name: str, owner_email: str) -> Pet | None: ...
    async def list_by_owner(self, owner_email: str) -> list[Pet]: ...
    async def create(self, data: dict) -> Pet: ...
    async def update(self, pet_id: uuid.UUID, data: dict) -> Pet | None: ...
    async def set_adopted(self, pet_id: uuid.UUID, adopted: bool) -> Pet | None: ...
    async def delete(self, pet_id: uuid.UUID) -> bool: ...


class AdoptionStore(Protocol):
    async def get(self, request_id: uuid.UUID) -> AdoptionRequest | None: ...
    async def find(self, user_email: str, pet_id: uuid.UUID) -> AdoptionRequest | None: ...
    async def list_for_owner(self, owner_email: str) -> list[AdoptionRequest]: ...
    async def create(self, data: dict) -> AdoptionRequest | None: ...
    async def set_status(self, request_id: uuid.UUID, status: str) -> AdoptionRequest | None: ...


class CampaignStore(Protocol):
    async def get(self, campaign_id: uuid.UUID) -> DonationCampaign | None: ...
    async def list_recent(self, limit: int | None = None) -> list[DonationCampaign]: ...
    async def list_by_owner(self, owner_email: str) -> list[DonationCampaign]: ...
    async def recommended(
        self, exclude_id: uuid.UUID, limit: int
    ) -> list[DonationCampaign]: ...
    async def create(self, data: dict) -> DonationCampaign: ...
    async def update(self, campaign_id: uuid.UUID, data: dict) -> DonationCampaign | None: ...
    async def set_paused(self, campaign_id: uuid.UUID, paused: bool) -> DonationCampaign | None: ...
    async def delete(self, campaign_id: uuid.UUID) -> bool: ...

    async def append_donation(
        self, campaign_id: uuid.UUID, entry: dict
    ) -> DonationCampaign | None:
        """Append ``entry`` and bump ``donated_amount`` in one atomic write.

        Returns None when the campaign is missing, paused, or already holds
        an entry with the same ``transaction_id``.
        """
        ...

    async def donations_by(self, donator_email: str) -> list[tuple[DonationCampaign, dict]]: ...

    async def remove_donation(
        self, campaign_id: uuid.UUID, transaction_id: str, donator_email: str
    ) -> bool:
        """Pull the donator's entry with ``transaction_id``; ``donated_amount`` is kept."""
        ...


class ReviewStore(Protocol):
    async def list_all(self) -> list[Review]: ...
    async def create(self, data: dict) -> Review: ...
