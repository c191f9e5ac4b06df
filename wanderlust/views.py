from django.shortcuts import redirect, render

from .exceptions import DEFAULT_ERROR_MESSAGE


def home(request):
    return redirect("listing-list")


def page_not_found(request, exception=None):
    return render(
        request, "error.html", {"message": "Page Not Found", "status_code": 404}, status=404
    )


def server_error(request):
    return render(
        request, "error.html", {"message": DEFAULT_ERROR_MESSAGE, "status_code": 500}, status=500
    )
