from django.urls import path

from checkout.handlers import BookingListView, RazorpayView

urlpatterns = [
    path("razorpay", RazorpayView.as_view(), name="razorpay"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
]
