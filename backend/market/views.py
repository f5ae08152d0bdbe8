from __future__ import annotations

from django.http import HttpResponse
from rest_framework import status, views
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .cache import cached_market_table
from .errors import MarketGenerationError
from .rendering import compute_market_view
from .serializers import MarketQuerySerializer, MarketViewSerializer


class MarketTableView(views.APIView):
    """Public market table as HTML; diagnostics are rendered in place of the table."""
    permission_classes = [AllowAny]

    def get(self, request):
        ser = MarketQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        html = cached_market_table(
            data.get("station"),
            data["bid_type"],
            data["template"],
            base_url=data.get("base_url") or None,
            rows_limit=data.get("limit"),
            tax_mode=data.get("tax_mode"),
        )
        return HttpResponse(html, content_type="text/html; charset=utf-8")


class MarketListView(views.APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        ser = MarketQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            view = compute_market_view(
                data.get("station"),
                data["bid_type"],
                tax_mode=data.get("tax_mode"),
                rows_limit=data.get("limit"),
            )
        except MarketGenerationError as e:
            return Response(
                {"detail": str(e), "errors": e.errors},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(MarketViewSerializer(view).data, status=status.HTTP_200_OK)
