from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import ListingViewSet

# Paths have no trailing slash: /listings, /listings/<id>, /listings/<id>/edit
router = SimpleRouter(trailing_slash=False)
router.register(r"listings", ListingViewSet, basename="listing")

urlpatterns = [
    path("", include(router.urls)),
]
