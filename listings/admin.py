from django.contrib import admin
from django.db.models import Avg, Count

from .models import Listing, ListingReview


class ListingPriceRangeFilter(admin.SimpleListFilter):
    title = "Price"
    parameter_name = "price_range"

    def lookups(self, request, model_admin):
        return (
            ("<100", "< 100"),
            ("100-250", "100–250"),
            ("250-500", "250–500"),
            (">500", "> 500"),
        )

    def queryset(self, request, queryset):
        val = self.value()
        if val == "<100":
            return queryset.filter(price__lt=100)
        if val == "100-250":
            return queryset.filter(price__gte=100, price__lte=250)
        if val == "250-500":
            return queryset.filter(price__gte=250, price__lte=500)
        if val == ">500":
            return queryset.filter(price__gt=500)
        return queryset


class ListingReviewInline(admin.TabularInline):
    model = ListingReview
    extra = 0
    raw_id_fields = ("review",)
    readonly_fields = ("attached_at",)


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = (
        "id", "title", "location", "country", "price",
        "reviews_total", "rating", "created_at",
    )
    search_fields = ("title", "description", "location", "country")
    list_filter = (
        ListingPriceRangeFilter,
        "country",
        ("created_at", admin.DateFieldListFilter),
    )
    ordering = ("-created_at",)
    date_hierarchy = "created_at"
    inlines = [ListingReviewInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _reviews_total=Count("reviews"),
            _rating=Avg("reviews__rating"),
        )

    @admin.display(description="Reviews", ordering="_reviews_total")
    def reviews_total(self, obj):
        return obj._reviews_total

    @admin.display(description="Rating", ordering="_rating")
    def rating(self, obj):
        return round(obj._rating, 2) if obj._rating is not None else "-"
