"""ark CLI entrypoint.

Subcommands: status, order-type, allowance (read-only) and list, offer, cancel
(signed with the account from ARK_SECRET_ACCOUNT_ADDRESS / ARK_SECRET_ACCOUNT_PRIVATE_KEY).

Results are printed as one JSON object on stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from arksdk.actions.order import (
    CancelOrderParameters,
    CreateListingParameters,
    CreateOfferParameters,
    cancel_order,
    create_listing,
    create_offer,
)
from arksdk.actions.read import (
    GetOrderStatusParameters,
    GetOrderTypeParameters,
    get_allowance,
    get_order_status,
    get_order_type,
)
from arksdk.adapters.env_provider import EnvSecretsProvider, MissingSecretError
from arksdk.adapters.starknet import FullNodeProvider, StarknetAccount
from arksdk.config.config_loader import ConfigLoader
from arksdk.config.configs import Config, create_config
from arksdk.errors.errors import ArkError
from arksdk.ports.secrets_provider import SecretsProvider
from arksdk.types.cairo import decode_short_string, to_felt

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _felt_arg(value: str) -> int:
    try:
        return to_felt(value)
    except ArkError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """
    Return the top-level CLI argument parser.
    """
    p = argparse.ArgumentParser(prog="ark")
    p.add_argument("--config", type=Path, required=True, help="Network config (TOML)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    sub = p.add_subparsers(dest="command", required=True)

    def add_order_hash(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--order-hash", type=_felt_arg, required=True)

    def add_window(sp: argparse.ArgumentParser) -> None:
        """Arguments shared by order-creating subcommands."""
        sp.add_argument("--broker", type=_felt_arg, required=True, help="Broker address")
        sp.add_argument("--currency", type=_felt_arg, default=None, help="Currency address")
        sp.add_argument("--start-date", type=int, default=None, help="Unix seconds")
        sp.add_argument("--end-date", type=int, default=None, help="Unix seconds")
        sp.add_argument("--no-wait", action="store_true", help="Do not wait for inclusion")

    add_order_hash(sub.add_parser("status", help="Show the status of an order"))
    add_order_hash(sub.add_parser("order-type", help="Show the type of an order"))

    allowance = sub.add_parser("allowance", help="Show the executor's ERC-20 allowance")
    allowance.add_argument("--owner", type=_felt_arg, required=True)
    allowance.add_argument("--currency", type=_felt_arg, default=None)

    listing = sub.add_parser("list", help="List an ERC-721 token")
    listing.add_argument("--token-address", type=_felt_arg, required=True)
    listing.add_argument("--token-id", type=int, required=True)
    listing.add_argument("--amount", type=int, required=True)
    add_window(listing)

    offer = sub.add_parser("offer", help="Make an offer on a token or a collection")
    offer.add_argument("--token-address", type=_felt_arg, required=True)
    offer.add_argument("--token-id", type=int, default=None, help="Omit for any token")
    offer.add_argument("--amount", type=int, required=True)
    add_window(offer)

    cancel = sub.add_parser("cancel", help="Cancel an order")
    add_order_hash(cancel)
    cancel.add_argument("--token-address", type=_felt_arg, required=True)
    cancel.add_argument("--token-id", type=int, default=None)
    cancel.add_argument("--no-wait", action="store_true")
    return p


async def _account(
    provider: FullNodeProvider, secrets: SecretsProvider, chain_id: int
) -> StarknetAccount:
    return await StarknetAccount.from_key(
        provider,
        address=secrets.get("account_address"),
        private_key=secrets.get("account_private_key"),
        chain_id=chain_id,
    )


async def run_command(
    args: argparse.Namespace,
    config: Config,
    provider: FullNodeProvider,
    secrets: SecretsProvider,
) -> dict[str, Any]:
    """Dispatch a parsed command; returns the JSON-serialisable result."""
    if args.command == "status":
        status = await get_order_status(config, GetOrderStatusParameters(args.order_hash))
        return {"order_hash": hex(args.order_hash), "order_status": status.order_status.value}

    if args.command == "order-type":
        order_type = await get_order_type(config, GetOrderTypeParameters(args.order_hash))
        return {"order_hash": hex(args.order_hash), "order_type": order_type.order_type.value}

    if args.command == "allowance":
        currency = args.currency if args.currency is not None else config.currency_address
        value = await get_allowance(config, currency, args.owner)
        return {"owner": hex(args.owner), "currency": hex(currency), "allowance": str(value)}

    chain_id = await provider.get_chain_id()
    account = await _account(provider, secrets, chain_id)
    result: dict[str, Any] = {"chain": decode_short_string(chain_id)}

    if args.command == "list":
        created = await create_listing(
            config,
            CreateListingParameters(
                account=account,
                broker_address=args.broker,
                token_address=args.token_address,
                token_id=args.token_id,
                amount=args.amount,
                currency_address=args.currency,
                start_date=args.start_date,
                end_date=args.end_date,
                wait_for_transaction=not args.no_wait,
            ),
        )
        result.update(order_hash=hex(created.order_hash), transaction_hash=created.transaction_hash)
    elif args.command == "offer":
        created = await create_offer(
            config,
            CreateOfferParameters(
                account=account,
                broker_address=args.broker,
                token_address=args.token_address,
                token_id=args.token_id,
                amount=args.amount,
                currency_address=args.currency,
                start_date=args.start_date,
                end_date=args.end_date,
                wait_for_transaction=not args.no_wait,
            ),
        )
        result.update(order_hash=hex(created.order_hash), transaction_hash=created.transaction_hash)
    elif args.command == "cancel":
        cancelled = await cancel_order(
            config,
            CancelOrderParameters(
                account=account,
                order_hash=args.order_hash,
                token_address=args.token_address,
                token_id=args.token_id,
                wait_for_transaction=not args.no_wait,
            ),
        )
        result.update(transaction_hash=cancelled.transaction_hash)
    else:  # pragma: no cover - argparse rejects unknown commands
        raise ValueError(f"Unknown command {args.command!r}")
    return result


async def _main_async(args: argparse.Namespace) -> dict[str, Any]:
    network = ConfigLoader().load_network_config(str(args.config))
    async with FullNodeProvider.open(network.node_url) as provider:
        config = create_config(network, provider=provider)
        return await run_command(args, config, provider, EnvSecretsProvider())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        result = asyncio.run(_main_async(args))
    except (ArkError, MissingSecretError) as exc:
        logger.error(f"ark {args.command} failed: {exc}")
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        return 1

    print(json.dumps(result, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
