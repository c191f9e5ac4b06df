from decimal import Decimal

import pytest

from listings.models import Listing
from listings.services import add_review


@pytest.fixture
def listing_factory(db):
    def create_listing(title="Cozy Cottage", price="100.00", **extra):
        data = dict(
            title=title,
            description=extra.pop("description", "A lovely place to stay for a while."),
            price=Decimal(str(price)),
            location=extra.pop("location", "Malibu"),
            country=extra.pop("country", "United States"),
            **extra,
        )
        return Listing.objects.create(**data)
    return create_listing


@pytest.fixture
def review_factory(db):
    def create_review(listing, rating=5, comment="Wonderful stay, would come back.", author="Traveler"):
        return add_review(listing, {"rating": rating, "comment": comment, "author": author})
    return create_review


@pytest.fixture
def listing_payload():
    return {
        "title": "Mountain Retreat",
        "description": "Unplug and unwind in this peaceful mountain cabin.",
        "image": "",
        "price": "120.50",
        "location": "Aspen",
        "country": "United States",
    }
