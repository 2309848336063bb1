"""Signup and session routes."""

from django.urls import path

from . import views

urlpatterns = [
    path("users/new/", views.user_new, name="user_new"),
    path("users/", views.user_create, name="user_create"),
    path("session/new/", views.session_new, name="session_new"),
    path("session/", views.session, name="session"),
    path("session/delete/", views.session_destroy, name="session_delete"),
]
