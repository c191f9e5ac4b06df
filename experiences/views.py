import logging

from rest_framework import generics
from rest_framework.response import Response

from .ranking import ExperienceParams, SORT_CHOICES, rank_experiences
from .serializers import ExperienceSerializer

logger = logging.getLogger(__name__)


class ExperienceListView(generics.GenericAPIView):
    """
    GET /experiences?sort=&minPrice=&maxPrice=&minRating=
    sort: popular (default), price-low, price-high, rating, newest.
    Malformed numbers are ignored rather than rejected.
    """
    serializer_class = ExperienceSerializer
    filter_backends = []

    def get(self, request, *args, **kwargs):
        params = ExperienceParams.from_query(request.query_params)
        experiences = self.get_serializer(rank_experiences(params), many=True).data
        logger.info(
            "Experiences ranked sort=%s min_price=%s max_price=%s min_rating=%s count=%s",
            params.sort, params.min_price, params.max_price, params.min_rating, len(experiences),
        )
        return Response(
            {"experiences": experiences, "params": params, "sort_choices": SORT_CHOICES},
            template_name="experiences/index.html",
        )
