from django.urls import path

from .views import CurrencyListView, ExchangeRateRangeView

urlpatterns = [
    path("rates/", ExchangeRateRangeView.as_view(), name="exchange-rate-range"),
    path("currencies/", CurrencyListView.as_view(), name="currency-list"),
]
