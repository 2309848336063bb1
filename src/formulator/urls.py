"""Root URL routes."""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from dashboards import views as dashboard_views

urlpatterns = [
    path("", dashboard_views.dashboard, name="dashboard"),
    path("dashboards/", include("dashboards.urls")),
    path("admin/", admin.site.urls),
    path("", include("accounts.urls")),
    path("ingredients/", include("ingredients.urls")),
    path("recipes/", include("recipes.urls")),
    path("inventory-items/", include("inventory.urls")),
    path("batches/", include("batches.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
