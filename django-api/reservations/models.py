"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Member(models.Model):
    """Persistence model for members."""

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=100)
    profile_image_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.email


class Store(models.Model):
    """Persistence model for stores."""

    owner = models.ForeignKey(Member, on_delete=models.PROTECT, related_name="stores")
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100)
    body = models.TextField(blank=True)
    address = models.CharField(max_length=255)
    contact = models.CharField(max_length=50, blank=True)
    latitude = models.FloatField(default=0.0)
    longitude = models.FloatField(default=0.0)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.name


class StoreImage(models.Model):
    """Persistence model for store images."""

    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name="images")
    link = models.URLField(max_length=500)
    is_thumbnail = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.link


class Item(models.Model):
    """Persistence model for items."""

    class Status(models.TextChoices):
        ACTIVE = "active"
        DELETED = "deleted"

    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name="items")
    name = models.CharField(max_length=100)
    price = models.PositiveIntegerField()
    total_ticket = models.PositiveIntegerField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class Reservation(models.Model):
    """Persistence model for reservations."""

    class Status(models.TextChoices):
        PENDING = "pending"
        CANCELLED = "cancelled"

    member = models.ForeignKey(Member, on_delete=models.PROTECT, related_name="reservations")
    store = models.ForeignKey(Store, on_delete=models.PROTECT, related_name="reservations")
    reservation_date = models.DateField()
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=30)
    email = models.EmailField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    total_price = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-reservation_date", "-id"]
        indexes = [
            models.Index(fields=["store", "reservation_date"]),
            models.Index(fields=["member"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.reservation_date}"


class ReservationItem(models.Model):
    """Persistence model for reservation lines."""

    reservation = models.ForeignKey(Reservation, on_delete=models.CASCADE, related_name="lines")
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name="reservation_lines")
    ticket_count = models.PositiveIntegerField()
    unit_price = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.item_id} x{self.ticket_count}"
