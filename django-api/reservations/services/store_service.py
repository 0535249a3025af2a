"""Store service - registering stores and the customer-facing view of one."""

from collections.abc import Sequence

import structlog

from reservations.domain import Identity, ItemDraft, Store, StoreDetail, StoreDraft
from reservations.domain.errors import MemberNotFoundError, StoreNotFoundError
from reservations.services.inventory_service import InventoryService, parse_store_id
from reservations.stores.interfaces import MemberLookup, StoreRepository

logger = structlog.get_logger(__name__)


class StoreService:
    """Service for store registration and detail pages."""

    def __init__(
        self,
        stores: StoreRepository,
        members: MemberLookup,
        inventory: InventoryService,
    ) -> None:
        self._stores = stores
        self._members = members
        self._inventory = inventory

    def create_store(
        self, identity: Identity, draft: StoreDraft, items: Sequence[ItemDraft]
    ) -> Store:
        """Register a store owned by the caller, with its images and items.

        Raises:
            MemberNotFoundError: If no member is registered under the caller's email.
        """
        owner = self._members.find_by_email(identity.email)
        if owner is None:
            raise MemberNotFoundError(identity.email)

        store = self._stores.save(owner.id, draft, items)
        logger.info(
            "Store created",
            store_id=store.id.value,
            owner_id=owner.id.value,
            items=len(store.items),
            images=len(store.images),
        )
        return store

    def get_store_detail(self, store_id: str | int) -> StoreDetail:
        """Return a store with today's availability.

        Raises:
            InvalidIdError: If store_id is malformed.
            StoreNotFoundError: If the store does not exist.
        """
        parsed = parse_store_id(store_id)
        store = self._stores.find_by_id(parsed)
        if store is None:
            raise StoreNotFoundError(parsed.value)
        return self.describe(store)

    def describe(self, store: Store) -> StoreDetail:
        """Build the detail view of a loaded store.

        Thumbnails come first, the most recently added one leading; the other
        images follow in stored order. The owner's profile image is None when
        the owner has none.
        """
        thumbnails = [image.link for image in store.images if image.is_thumbnail]
        others = [image.link for image in store.images if not image.is_thumbnail]
        owner = self._members.find_by_id(store.owner_id)
        return StoreDetail(
            store=store,
            items=tuple(self._inventory.availability_for(store)),
            image_links=tuple(reversed(thumbnails)) + tuple(others),
            profile_image_url=owner.profile_image_url if owner is not None else None,
        )
