from django.contrib import admin
from django.urls import path, include
from .views import home

urlpatterns = [
    # Home page redirects to the catalog
    path("", home, name="home"),

    # Admin
    path("admin/", admin.site.urls),

    # Session login/logout
    path("auth/", include("rest_framework.urls")),

    # Apps
    path("", include("listings.urls")),
    path("", include("experiences.urls")),
]

handler404 = "wanderlust.views.page_not_found"
handler500 = "wanderlust.views.server_error"
