"""
Experience ranking: listings filtered by price, enriched with review
statistics, filtered by average rating and sorted.

The whole pipeline is a single annotated queryset, so the database does the
join, the aggregation and the ordering:

    price filter -> annotate(review_count, average_rating)
                 -> average_rating filter -> order_by(...)
"""
import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.db.models import Avg, Count, FloatField, Prefetch, Value
from django.db.models.functions import Coalesce

from listings.models import Listing, ListingReview

logger = logging.getLogger(__name__)

SORT_POPULAR = "popular"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_RATING = "rating"
SORT_NEWEST = "newest"

DEFAULT_SORT = SORT_POPULAR

# The trailing pk keeps repeated runs identical when the sort key ties.
ORDERINGS = {
    SORT_PRICE_LOW: ("price", "pk"),
    SORT_PRICE_HIGH: ("-price", "pk"),
    SORT_RATING: ("-average_rating", "pk"),
    SORT_NEWEST: ("-created_at", "-pk"),
    SORT_POPULAR: ("-review_count", "-average_rating", "pk"),
}

SORT_CHOICES = tuple(ORDERINGS)


def parse_decimal(raw) -> Optional[Decimal]:
    """Unparseable or non-finite values count as absent."""
    if raw is None or str(raw).strip() == "":
        return None
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    return value


def parse_float(raw) -> Optional[float]:
    if raw is None or str(raw).strip() == "":
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class ExperienceParams:
    sort: str = DEFAULT_SORT
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_rating: Optional[float] = None

    @classmethod
    def from_query(cls, query_params):
        sort = (query_params.get("sort") or DEFAULT_SORT).strip()
        if sort not in ORDERINGS:
            logger.debug("Unknown sort %r, using %s", sort, DEFAULT_SORT)
            sort = DEFAULT_SORT
        return cls(
            sort=sort,
            min_price=parse_decimal(query_params.get("minPrice")),
            max_price=parse_decimal(query_params.get("maxPrice")),
            min_rating=parse_float(query_params.get("minRating")),
        )


def rank_experiences(params: ExperienceParams = None, queryset=None):
    """
    Returns a lazy queryset of listings annotated with `review_count` and
    `average_rating` (0 without reviews), filtered and ordered by `params`.
    Review links are prefetched in attach order for the projection.
    """
    params = params or ExperienceParams()
    qs = Listing.objects.all() if queryset is None else queryset

    # price bounds before the join
    if params.min_price is not None:
        qs = qs.filter(price__gte=params.min_price)
    if params.max_price is not None:
        qs = qs.filter(price__lte=params.max_price)

    qs = qs.annotate(
        review_count=Count("reviews"),
        average_rating=Coalesce(Avg("reviews__rating"), Value(0.0), output_field=FloatField()),
    )

    # the derived field only exists after the aggregation
    if params.min_rating is not None:
        qs = qs.filter(average_rating__gte=params.min_rating)

    qs = qs.order_by(*ORDERINGS.get(params.sort, ORDERINGS[DEFAULT_SORT]))
    return qs.prefetch_related(
        Prefetch("review_links", queryset=ListingReview.objects.order_by("id"))
    )
