from django.urls import path

from .views import MarketListView, MarketTableView

app_name = 'market'

urlpatterns = [
    path('', MarketListView.as_view(), name='market-list'),
    path('table', MarketTableView.as_view(), name='market-table'),
]
