"""Inventory routes."""

from django.urls import path

from . import views

urlpatterns = [
    path("", views.inventory_item_list, name="inventory_item_list"),
    path("new/", views.inventory_item_new, name="inventory_item_new"),
    path("<int:pk>/", views.inventory_item_detail, name="inventory_item_detail"),
    path("<int:pk>/edit/", views.inventory_item_edit, name="inventory_item_edit"),
    path(
        "<int:pk>/delete/", views.inventory_item_delete, name="inventory_item_delete"
    ),
]
