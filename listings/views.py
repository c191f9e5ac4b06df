import logging

from django.contrib import messages
from django.shortcuts import redirect
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets, decorators
from rest_framework.filters import SearchFilter
from rest_framework.response import Response

from reviews.serializers import ReviewSerializer
from wanderlust.exceptions import ListingNotFound
from .filters import ListingFilter
from .models import Listing
from .serializers import ListingSerializer
from . import services

logger = logging.getLogger(__name__)


class ListingViewSet(viewsets.GenericViewSet):
    """
    HTML pages for the listing catalog.
    - GET    /listings                         index (filters: price_min, price_max, location, country, search)
    - GET    /listings/new                     creation form
    - POST   /listings                         create, redirect to detail
    - GET    /listings/{id}                    detail with reviews
    - GET    /listings/{id}/edit               edit form
    - PUT    /listings/{id}                    full update, redirect to detail
    - DELETE /listings/{id}                    delete with its reviews, redirect to index
    - POST   /listings/{id}/reviews            attach a review
    - DELETE /listings/{id}/reviews/{review}   detach and delete a review
    Browsers send PUT/DELETE as POST + _method (see MethodOverrideMiddleware).
    """
    queryset = Listing.objects.all()
    serializer_class = ListingSerializer
    filterset_class = ListingFilter
    filter_backends = [DjangoFilterBackend, SearchFilter]
    search_fields = ["title", "description", "location", "country"]
    lookup_value_regex = r"\d+"  # keeps /listings/new out of the detail route

    def get_object(self):
        try:
            return Listing.objects.get(pk=self.kwargs[self.lookup_field])
        except Listing.DoesNotExist:
            logger.warning("Listing not found listing_id=%s", self.kwargs.get(self.lookup_field))
            raise ListingNotFound()

    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())
        listings = self.get_serializer(qs, many=True).data
        return Response({"listings": listings}, template_name="listings/index.html")

    @decorators.action(detail=False, methods=["get"], url_path="new")
    def new(self, request):
        return Response({}, template_name="listings/new.html")

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = serializer.save()
        messages.success(request, "New listing created!")
        return redirect("listing-detail", pk=listing.pk)

    def retrieve(self, request, *args, **kwargs):
        listing = self.get_object()
        context = {**self.get_serializer_context(), "with_reviews": True}
        data = self.get_serializer(listing, context=context).data
        return Response({"listing": data}, template_name="listings/show.html")

    @decorators.action(detail=True, methods=["get"], url_path="edit")
    def edit(self, request, pk=None):
        listing = self.get_object()
        return Response({"listing": self.get_serializer(listing).data}, template_name="listings/edit.html")

    def update(self, request, *args, **kwargs):
        listing = self.get_object()
        serializer = self.get_serializer(listing, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        messages.success(request, "Listing updated!")
        return redirect("listing-detail", pk=listing.pk)

    def destroy(self, request, *args, **kwargs):
        listing = self.get_object()
        services.delete_listing(listing)
        messages.success(request, "Listing deleted!")
        return redirect("listing-list")

    @decorators.action(detail=True, methods=["post"], url_path="reviews")
    def reviews(self, request, pk=None):
        listing = self.get_object()
        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.add_review(listing, serializer.validated_data)
        messages.success(request, "New review added!")
        return redirect("listing-detail", pk=listing.pk)

    @decorators.action(
        detail=True,
        methods=["delete"],
        url_path=r"reviews/(?P<review_id>\d+)",
        url_name="review-detail",
    )
    def delete_review(self, request, pk=None, review_id=None):
        listing = self.get_object()
        services.remove_review(listing, int(review_id))
        messages.success(request, "Review deleted!")
        return redirect("listing-detail", pk=listing.pk)
