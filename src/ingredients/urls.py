"""Ingredient routes."""

from django.urls import path

from . import views

urlpatterns = [
    path("", views.ingredient_list, name="ingredient_list"),
    path("new/", views.ingredient_new, name="ingredient_new"),
    path("<int:pk>/", views.ingredient_detail, name="ingredient_detail"),
    path("<int:pk>/edit/", views.ingredient_edit, name="ingredient_edit"),
    path("<int:pk>/delete/", views.ingredient_delete, name="ingredient_delete"),
]
