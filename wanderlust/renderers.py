from rest_framework.renderers import TemplateHTMLRenderer


class PageRenderer(TemplateHTMLRenderer):
    """
    Renders every DRF response as an HTML page.
    Views pass `template_name` on the Response; failures always use error.html
    with the {message, status_code} context built by page_exception_handler.
    """
    exception_template_names = ["error.html"]
