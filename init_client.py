"""
Create a client and, optionally, opening balances.

Example:
    python init_client.py --username alice --password secret123 --name "Alice" \
        --balance USD=500 --balance SAR=100
"""
import argparse
import asyncio
import logging
from decimal import Decimal, InvalidOperation

from exchange_office.core.logging import configure_logging
from exchange_office.core.money import is_supported_currency, quantize_money
from exchange_office.infrastructure.database import dispose_engine, get_session_factory, init_db
from exchange_office.modules.accounts import AccountService
from exchange_office.modules.clients import ClientCreateInput, ClientService

logger = logging.getLogger("init_client")


def parse_balance(raw: str) -> tuple[str, Decimal]:
    currency, _, amount = raw.partition("=")
    currency = currency.strip().upper()
    if not is_supported_currency(currency):
        raise argparse.ArgumentTypeError(f"unsupported currency: {currency}")
    try:
        value = quantize_money(amount.strip())
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"invalid amount: {amount}") from exc
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"invalid amount: {amount}")
    if value < 0:
        raise argparse.ArgumentTypeError("opening balance cannot be negative")
    return currency, value


async def create_client(username: str, password: str, name: str, balances: list[tuple[str, Decimal]]) -> None:
    await init_db()

    async with get_session_factory()() as db:
        clients = ClientService.with_session(db)
        if await clients.get_by_username(username):
            logger.info("Client %s already exists", username)
        else:
            client = await clients.create_client(ClientCreateInput(username=username, password=password, name=name))
            accounts = AccountService.with_session(db)
            await accounts.list_accounts(client.id)
            for currency, amount in balances:
                row = await accounts.repository.get_or_create(client.id, currency)
                await accounts.repository.set_balance(row, amount)
            await db.commit()
            logger.info("Client %s created (%s)", username, client.id)

    await dispose_engine()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--balance", action="append", type=parse_balance, default=[], metavar="CUR=AMOUNT")
    args = parser.parse_args()

    configure_logging()
    asyncio.run(create_client(args.username, args.password, args.name, args.balance))


if __name__ == "__main__":
    main()
