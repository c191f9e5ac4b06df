from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Seeds an empty store, then runs the development server on the configured PORT."

    def add_arguments(self, parser):
        parser.add_argument(
            "--host",
            default="127.0.0.1",
            help="Interface to bind (default 127.0.0.1).",
        )
        parser.add_argument(
            "--noreload",
            action="store_true",
            help="Disable the auto-reloader.",
        )
        parser.add_argument(
            "--no-seed",
            action="store_true",
            help="Do not load sample listings into an empty store.",
        )

    def handle(self, *args, **options):
        if not options["no_seed"]:
            call_command("seed_listings", if_empty=True, stdout=self.stdout)
        addrport = f"{options['host']}:{settings.SERVER_PORT}"
        self.stdout.write(f"Server is running on port {settings.SERVER_PORT}")
        call_command("runserver", addrport, use_reloader=not options["noreload"])
