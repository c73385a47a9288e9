from django.contrib import admin

from checkout.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["razorpay_order_id", "user", "event", "quantity", "amount", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["razorpay_order_id", "razorpay_payment_id", "user__email"]
    readonly_fields = [f.name for f in Booking._meta.fields]
