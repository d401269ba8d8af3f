"""
Minimal script that creates a checkout session and then lists recent payments.
"""

from __future__ import annotations

import argparse
import logging
import sys

from payark import (
    ConfigError,
    CreateCheckoutParams,
    PayArkDecodeError,
    PayArkError,
    create_client,
    load_config,
)
from payark.core.schemas import PROVIDERS


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a PayArk checkout session using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYARK_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--api-key", help="Provide the API key without relying on environment data")
    parser.add_argument("--amount", type=float, default=1000)
    parser.add_argument("--provider", choices=PROVIDERS, default="sandbox")
    parser.add_argument("--return-url", default="https://example.com/success")
    parser.add_argument(
        "--sandbox",
        action="store_true",
        default=None,
        help="Send requests in sandbox mode",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(env_file=args.env_file, api_key=args.api_key, sandbox=args.sandbox)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with create_client(config=config) as client:
        try:
            session = client.checkout.create(
                CreateCheckoutParams(
                    amount=args.amount,
                    provider=args.provider,
                    return_url=args.return_url,
                )
            )
            logging.info("Checkout session %s created: %s", session.id, session.checkout_url)

            page = client.payments.list(limit=5)
        except (PayArkError, PayArkDecodeError) as exc:
            logging.error("PayArk call failed: %s", exc)
            return 1

    for payment in page.data:
        logging.info("%s %s %s %s", payment.id, payment.status, payment.amount, payment.currency)
    return 0


if __name__ == "__main__":
    sys.exit(main())
