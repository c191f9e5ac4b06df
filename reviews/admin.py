from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "author", "rating", "short_comment", "listing", "created_at")
    list_select_related = ("listing_link__listing",)
    search_fields = ("author", "comment", "listing_link__listing__title")
    list_filter = ("rating", ("created_at", admin.DateFieldListFilter))
    ordering = ("-id",)

    @admin.display(description="Comment")
    def short_comment(self, obj):
        return obj.comment if len(obj.comment) <= 60 else f"{obj.comment[:57]}..."

    @admin.display(description="Listing")
    def listing(self, obj):
        link = getattr(obj, "listing_link", None)
        return link.listing if link else None
