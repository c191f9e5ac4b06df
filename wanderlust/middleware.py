import logging
import json
import time
from django.utils.deprecation import MiddlewareMixin

requests_logger = logging.getLogger("requests")
fallback_logger = logging.getLogger(__name__)

SENSITIVE_PATHS = (
    "/auth/login/",
    "/auth/logout/",
)

OVERRIDE_PARAM = "_method"
OVERRIDE_HEADER = "HTTP_X_HTTP_METHOD_OVERRIDE"
OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware(MiddlewareMixin):
    """
    HTML forms only send GET/POST. A POST carrying `_method` (form field,
    query string or X-HTTP-Method-Override header) is dispatched as PUT/PATCH/DELETE.
    """

    def process_request(self, request):
        if request.method != "POST":
            return None
        override = (
            request.GET.get(OVERRIDE_PARAM)
            or request.POST.get(OVERRIDE_PARAM)
            or request.META.get(OVERRIDE_HEADER)
            or ""
        ).upper()
        if override in OVERRIDABLE_METHODS:
            request.original_method = request.method
            request.method = override
        return None


class RequestLogMiddleware(MiddlewareMixin):
    """
    Logs incoming requests and responses:
    - method (plus original_method when overridden), path, status, user, duration, query string
    - does not log body, excludes sensitive paths
    """

    def process_request(self, request):
        request._start_time = time.time()

    def process_response(self, request, response):
        try:
            start = getattr(request, "_start_time", None)
            duration_ms = int((time.time() - start) * 1000) if start else None

            path = request.path

            # Skip statics/admin
            if path.startswith("/static/") or path.startswith("/admin/"):
                return response

            is_sensitive = path.startswith(SENSITIVE_PATHS)

            user_id = getattr(getattr(request, "user", None), "id", None)
            user_repr = f"user_id={user_id}" if user_id else "anon"
            status = getattr(response, "status_code", "-")

            if is_sensitive:
                requests_logger.info(
                    "HTTP %s %s -> %s [%s] %sms",
                    request.method,
                    path,
                    status,
                    user_repr,
                    duration_ms if duration_ms is not None else "-",
                )
            else:
                payload = {
                    "method": request.method,
                    "path": path,
                    "status": status,
                    "user": user_repr,
                    "duration_ms": duration_ms,
                    "query": request.META.get("QUERY_STRING", ""),
                }
                original = getattr(request, "original_method", None)
                if original:
                    payload["original_method"] = original
                requests_logger.info(json.dumps(payload, ensure_ascii=False))
        except Exception as e:
            # Never break a response due to logging
            fallback_logger.warning("Failed to log request/response: %s", e)
        return response
