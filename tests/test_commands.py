from io import StringIO

import pytest
from django.core.management import call_command

from listings.models import Listing, DEFAULT_IMAGE_URL
from listings.sample_data import SAMPLE_LISTINGS
from reviews.models import Review


@pytest.mark.django_db
def test_seed_replaces_listings_and_their_reviews(listing_factory, review_factory):
    old = listing_factory(title="Old listing")
    review_factory(old)
    out = StringIO()
    call_command("seed_listings", stdout=out)

    assert Listing.objects.count() == len(SAMPLE_LISTINGS)
    assert not Listing.objects.filter(title="Old listing").exists()
    assert Review.objects.count() == 0
    assert "Database seeded" in out.getvalue()


@pytest.mark.django_db
def test_seed_fills_missing_images():
    call_command("seed_listings", stdout=StringIO())
    blank = [item["title"] for item in SAMPLE_LISTINGS if not item["image_url"]]
    assert blank
    for listing in Listing.objects.filter(title__in=blank):
        assert listing.image_url == DEFAULT_IMAGE_URL


@pytest.mark.django_db
def test_seed_if_empty_keeps_existing(listing_factory):
    listing_factory(title="Keep me")
    out = StringIO()
    call_command("seed_listings", "--if-empty", stdout=out)
    assert list(Listing.objects.values_list("title", flat=True)) == ["Keep me"]
    assert "nothing to do" in out.getvalue()


@pytest.mark.django_db
def test_seed_if_empty_on_empty_store():
    call_command("seed_listings", "--if-empty", stdout=StringIO())
    assert Listing.objects.count() == len(SAMPLE_LISTINGS)


def _record_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "wanderlust.management.commands.serve.call_command",
        lambda *args, **kwargs: calls.append((args, kwargs)),
    )
    return calls


def test_serve_uses_configured_port(settings, monkeypatch):
    settings.SERVER_PORT = 9123
    calls = _record_calls(monkeypatch)
    out = StringIO()
    call_command("serve", "--noreload", "--no-seed", stdout=out)
    assert calls == [(("runserver", "127.0.0.1:9123"), {"use_reloader": False})]
    assert "9123" in out.getvalue()


def test_serve_seeds_empty_store_before_running(settings, monkeypatch):
    settings.SERVER_PORT = 9124
    calls = _record_calls(monkeypatch)
    call_command("serve", "--noreload", stdout=StringIO())
    assert [args[0] for args, _ in calls] == ["seed_listings", "runserver"]
    assert calls[0][1]["if_empty"] is True


@pytest.mark.django_db
def test_serve_startup_seed_fills_empty_store(settings, monkeypatch):
    from wanderlust.management.commands import serve

    real_call_command = call_command
    started = []

    def fake_call_command(name, *args, **kwargs):
        if name == "runserver":
            started.append(args)
            return None
        return real_call_command(name, *args, **kwargs)

    monkeypatch.setattr(serve, "call_command", fake_call_command)
    call_command("serve", "--noreload", stdout=StringIO())
    assert Listing.objects.count() == len(SAMPLE_LISTINGS)
    assert started


@pytest.mark.django_db
def test_serve_startup_seed_keeps_existing_listings(listing_factory, monkeypatch):
    from wanderlust.management.commands import serve

    real_call_command = call_command
    listing_factory(title="Keep me")

    def fake_call_command(name, *args, **kwargs):
        if name == "runserver":
            return None
        return real_call_command(name, *args, **kwargs)

    monkeypatch.setattr(serve, "call_command", fake_call_command)
    call_command("serve", "--noreload", stdout=StringIO())
    assert list(Listing.objects.values_list("title", flat=True)) == ["Keep me"]
