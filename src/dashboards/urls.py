"""Dashboard routes."""

from django.urls import path

from . import views

urlpatterns = [
    path("show/", views.dashboard, name="dashboard_show"),
]
