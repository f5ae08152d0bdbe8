from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.permissions import IsManager, IsManagerOrReadOnly

from .models import Bid
from .serializers import BidSerializer


class BidViewSet(viewsets.ModelViewSet):
    """
    Bids with optional filters:
      ?partner=<id>        bids of one partner
      ?archived=true|false archived bids (newest archive first) or current ones (newest first)
      ?bid_type=BUY|SELL
    """
    serializer_class = BidSerializer
    permission_classes = [IsManagerOrReadOnly]

    def get_queryset(self):
        qs = Bid.objects.select_related("agent", "elevator", "elevator__station")
        params = self.request.query_params

        partner = params.get("partner")
        if partner:
            qs = qs.filter(agent_id=partner)

        bid_type = params.get("bid_type")
        if bid_type:
            qs = qs.of_type(bid_type.upper())

        archived = (params.get("archived") or "").strip().lower()
        if archived in ("true", "1"):
            return qs.archived().order_by("-archive_date", "-id")
        if archived in ("false", "0"):
            return qs.filter(archive_date__isnull=True).order_by("-creation_date", "-id")
        return qs.order_by("-creation_date", "-id")

    @action(detail=True, methods=["post"], permission_classes=[IsManager])
    def archive(self, request, pk=None):
        bid = self.get_object()
        if bid.is_archived:
            return Response({"status": "already_archived", "archive_date": bid.archive_date}, status=status.HTTP_200_OK)
        bid.archive()
        return Response({"status": "archived", "archive_date": bid.archive_date}, status=status.HTTP_200_OK)
