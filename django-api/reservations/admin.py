from django.contrib import admin

from reservations.models import Item, Member, Reservation, ReservationItem, Store, StoreImage


class ItemInline(admin.TabularInline):
    model = Item
    extra = 1


class StoreImageInline(admin.TabularInline):
    model = StoreImage
    extra = 1


class ReservationItemInline(admin.TabularInline):
    model = ReservationItem
    extra = 0


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ["email", "name", "created_at"]
    search_fields = ["email", "name"]


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "address", "created_at"]
    search_fields = ["name", "address"]
    inlines = [ItemInline, StoreImageInline]


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ["name", "store", "price", "total_ticket", "status"]
    list_filter = ["status", "store"]


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ["name", "store", "member", "reservation_date", "status", "total_price"]
    list_filter = ["status", "store"]
    inlines = [ReservationItemInline]
