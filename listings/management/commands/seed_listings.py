from django.core.management.base import BaseCommand
from django.db import transaction

from listings.models import Listing, ListingReview
from listings.sample_data import SAMPLE_LISTINGS
from listings.services import create_listing
from reviews.services import delete_reviews_by_ids


class Command(BaseCommand):
    help = "Replaces all listings (and their reviews) with the bundled sample data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--if-empty",
            action="store_true",
            help="Only seed when there are no listings yet.",
        )

    def handle(self, *args, **options):
        existing = Listing.objects.count()
        if options["if_empty"] and existing:
            self.stdout.write(f"Store already has {existing} listings, nothing to do.")
            return

        with transaction.atomic():
            review_ids = list(ListingReview.objects.values_list("review_id", flat=True))
            Listing.objects.all().delete()
            deleted_reviews = delete_reviews_by_ids(review_ids)
            for item in SAMPLE_LISTINGS:
                create_listing(item)

        self.stdout.write(f"Removed {existing} listings and {deleted_reviews} reviews.")
        self.stdout.write(self.style.SUCCESS(f"Database seeded with {len(SAMPLE_LISTINGS)} listings."))
