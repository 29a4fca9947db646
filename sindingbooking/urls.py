from django.urls import path

from sindingbooking import views

app_name = "sindingbooking"

urlpatterns = [
    path("", views.booking_form, name="form"),
    path("quote/", views.quote, name="quote"),
    path("submit/", views.submit_booking, name="submit"),
]
