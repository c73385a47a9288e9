from checkout.handlers.views import BookingListView, RazorpayView

__all__ = ["BookingListView", "RazorpayView"]
