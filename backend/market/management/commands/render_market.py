from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from core.choices import NDS, BidType
from market.rendering import MARKET_TEMPLATES, render_market_table


class Command(BaseCommand):
    help = "Render a market table to stdout or a file (e.g. for mailing or download)"

    def add_arguments(self, parser):
        parser.add_argument("--station", default=None, help="Destination station code")
        parser.add_argument("--bid-type", default=BidType.SELL, choices=BidType.values)
        parser.add_argument("--tax-mode", default=None, choices=NDS.values)
        parser.add_argument("--template", default="market_table_download", choices=MARKET_TEMPLATES)
        parser.add_argument("--limit", type=int, default=-1)
        parser.add_argument("--base-url", default=None)
        parser.add_argument("--output", default=None, help="Write to this file instead of stdout")

    def handle(self, *args, **options):
        html = render_market_table(
            options["station"],
            options["bid_type"],
            options["template"],
            base_url=options["base_url"],
            rows_limit=options["limit"],
            tax_mode=options["tax_mode"],
        )

        output = options["output"]
        if not output:
            self.stdout.write(html)
            return

        path = Path(output)
        try:
            path.write_text(html, encoding="utf-8")
        except OSError as e:
            raise CommandError(f"Could not write market table to {path}: {e}")
        self.stdout.write(self.style.SUCCESS(f"Market table written to {path}"))
