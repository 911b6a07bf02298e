"""Look up a single storefront product and print the JSON envelope."""

import json

from django.core.management.base import BaseCommand

from products.fetchers import RetryingFetcher
from products.services import build_fetcher, lookup_product


class Command(BaseCommand):
    help = "Fetch a product's structured JSON from its storefront page URL."

    def add_arguments(self, parser):
        parser.add_argument("product_url", type=str, help="Product page URL")
        parser.add_argument(
            "--max-retries",
            type=int,
            default=None,
            help="Override PRODUCT_FETCH['MAX_RETRIES']",
        )

    def handle(self, *args, **options):
        fetcher = build_fetcher()
        if options["max_retries"] is not None:
            fetcher = RetryingFetcher(
                max_retries=options["max_retries"], timeout=fetcher.timeout
            )

        lookup = lookup_product(options["product_url"], fetcher=fetcher)
        self.stdout.write(json.dumps(lookup.to_dict(), indent=2))
