from django.apps import AppConfig


class MarketConfig(AppConfig):
    name = "market"
    verbose_name = "Market"

    def ready(self):
        from django.apps import apps

        from .signals import connect_signals
        connect_signals(apps)
