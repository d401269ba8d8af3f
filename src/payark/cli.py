"""
Command-line interface for exercising the PayArk API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence, Tuple

from pydantic import BaseModel

from .api import ConfigError, PayArk, create_client, load_config
from .core.errors import PayArkDecodeError, PayArkError
from .core.schemas import PROVIDERS, CreateCheckoutParams


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _env_override(value: str) -> Tuple[str, str]:
    """Parse ``--set KEY=VALUE``; keys are upper-cased to match ``PAYARK_*``."""
    key, sep, val = value.partition("=")
    key = key.strip().upper()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{value}'")
    return key, val.strip()


def _amount(value: str) -> float | int:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid amount '{value}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payark",
        description="Call the PayArk payment gateway API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYARK_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        default=None,
        help="Send requests with the x-sandbox-mode header",
    )

    resources = parser.add_subparsers(dest="resource", required=True)

    checkout = resources.add_parser("checkout", help="Checkout sessions")
    checkout_actions = checkout.add_subparsers(dest="action", required=True)
    create = checkout_actions.add_parser("create", help="Create a checkout session")
    create.add_argument("--amount", type=_amount, required=True)
    create.add_argument("--provider", choices=PROVIDERS, required=True)
    create.add_argument("--return-url", required=True)
    create.add_argument("--cancel-url")
    create.add_argument("--currency", default="NPR")

    payments = resources.add_parser("payments", help="Payments")
    payment_actions = payments.add_subparsers(dest="action", required=True)
    listing = payment_actions.add_parser("list", help="List payments")
    listing.add_argument("--limit", type=int)
    listing.add_argument("--offset", type=int)
    listing.add_argument("--project-id")
    retrieve = payment_actions.add_parser("retrieve", help="Retrieve a payment")
    retrieve.add_argument("payment_id")

    projects = resources.add_parser("projects", help="Projects")
    project_actions = projects.add_subparsers(dest="action", required=True)
    project_actions.add_parser("list", help="List projects")

    return parser


def _dispatch(client: PayArk, args: argparse.Namespace) -> Any:
    if args.resource == "checkout":
        params = CreateCheckoutParams(
            amount=args.amount,
            currency=args.currency,
            provider=args.provider,
            return_url=args.return_url,
            cancel_url=args.cancel_url,
        )
        return client.checkout.create(params)
    if args.resource == "payments":
        if args.action == "retrieve":
            return client.payments.retrieve(args.payment_id)
        return client.payments.list(
            limit=args.limit,
            offset=args.offset,
            project_id=args.project_id,
        )
    return client.projects.list()


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = dict(args.set or ())

    try:
        config = load_config(
            env_file=args.env_file,
            overrides=overrides,
            sandbox=args.sandbox,
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with create_client(config=config) as client:
        try:
            result = _dispatch(client, args)
        except PayArkError as exc:
            logging.error("Request failed: %s", exc)
            return 1
        except PayArkDecodeError as exc:
            logging.error("Unexpected response: %s", exc)
            return 1

    json.dump(_to_jsonable(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def main() -> None:
    sys.exit(run_cli())
