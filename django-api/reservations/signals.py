"""Django signals for cache invalidation.

Any write that can change what a store page or availability listing shows
replaces that store's cache version after the surrounding transaction
commits.
"""

import structlog
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from reservations.cache import invalidate_store
from reservations.models import Item, Reservation, ReservationItem, Store, StoreImage

logger = structlog.get_logger(__name__)


def _invalidate(store_id: int, reason: str) -> None:
    transaction.on_commit(lambda: invalidate_store(store_id))
    logger.debug("Scheduled store cache invalidation", store_id=store_id, reason=reason)


@receiver([post_save, post_delete], sender=Store)
def invalidate_store_cache(sender, instance, **kwargs):
    """Invalidate caches when a store is saved or deleted."""
    _invalidate(instance.pk, "store")


@receiver([post_save, post_delete], sender=StoreImage)
def invalidate_store_image_cache(sender, instance, **kwargs):
    """Invalidate caches when a store image is saved or deleted."""
    _invalidate(instance.store_id, "store_image")


@receiver([post_save, post_delete], sender=Item)
def invalidate_item_cache(sender, instance, **kwargs):
    """Invalidate caches when an item is saved or deleted."""
    _invalidate(instance.store_id, "item")


@receiver([post_save, post_delete], sender=Reservation)
def invalidate_reservation_cache(sender, instance, **kwargs):
    """Invalidate caches when a reservation is saved or deleted."""
    _invalidate(instance.store_id, "reservation")


@receiver([post_save, post_delete], sender=ReservationItem)
def invalidate_reservation_item_cache(sender, instance, **kwargs):
    """Invalidate caches when a reservation line is saved or deleted."""
    _invalidate(instance.item.store_id, "reservation_item")
