"""Balance-moving operations: currency exchange and client-to-client transfer.

Both operations read the affected account rows, compute the new balances in
decimal arithmetic, write the rows back and append to the transaction log.
They only flush; the caller's session commits everything at once, so a
failure anywhere leaves no partial update behind. Account rows are
version-checked on write, which turns a concurrent modification into
``ConcurrentUpdateError`` instead of a lost update.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from exchange_office.core.money import is_supported_currency, quantize_money, to_decimal
from exchange_office.db.models import Account as AccountModel
from exchange_office.modules.accounts.exceptions import AccountNotFoundError
from exchange_office.modules.accounts.repository import AccountRepository
from exchange_office.modules.clients.repository import ClientRepository
from exchange_office.modules.rates.service import RateService
from exchange_office.modules.transactions.models import TransactionType
from exchange_office.modules.transactions.repository import TransactionRepository

from .exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidRecipientError,
    RecipientNotFoundError,
    SameCurrencyExchangeError,
    UnsupportedCurrencyError,
)
from .models import ExchangeResult, TransferResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LedgerService:
    clients: ClientRepository
    accounts: AccountRepository
    transactions: TransactionRepository
    rates: RateService

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LedgerService":
        # repositories import module exceptions, so they are loaded late
        from exchange_office.infrastructure.database.repositories import (
            SqlAccountRepository,
            SqlClientRepository,
            SqlTransactionRepository,
        )

        return cls(
            clients=SqlClientRepository(session),
            accounts=SqlAccountRepository(session),
            transactions=SqlTransactionRepository(session),
            rates=RateService.with_session(session),
        )

    async def exchange(
        self,
        client_id: str,
        from_currency: str,
        to_currency: str,
        amount: Decimal | int | str,
    ) -> ExchangeResult:
        amount = self._checked_amount(amount)
        self._check_currency(from_currency)
        self._check_currency(to_currency)
        if from_currency == to_currency:
            raise SameCurrencyExchangeError()

        source = await self.accounts.get(client_id, from_currency)
        if source is None:
            raise AccountNotFoundError(client_id, from_currency, "Source account not found")
        self._check_funds(source, amount)

        rate = await self.rates.resolve_rate(from_currency, to_currency)
        converted = amount * rate

        target = await self.accounts.get_or_create(client_id, to_currency)
        new_source_balance = quantize_money(to_decimal(source.balance) - amount)
        new_target_balance = quantize_money(to_decimal(target.balance) + converted)

        await self.accounts.set_balance(source, new_source_balance)
        await self.accounts.set_balance(target, new_target_balance)
        await self.transactions.add_transaction(
            client_id=client_id,
            type=TransactionType.EXCHANGE.value,
            amount=amount,
            currency_from=from_currency,
            currency_to=to_currency,
            exchange_rate=rate,
        )

        logger.info(
            "Client %s exchanged %s %s -> %s %s at %s",
            client_id, amount, from_currency, quantize_money(converted), to_currency, rate,
        )
        return ExchangeResult(
            rate=rate,
            converted_amount=quantize_money(converted),
            new_balances={from_currency: new_source_balance, to_currency: new_target_balance},
        )

    async def transfer(
        self,
        sender_id: str,
        recipient_username: str,
        currency: str,
        amount: Decimal | int | str,
        message: Optional[str] = None,
    ) -> TransferResult:
        amount = self._checked_amount(amount)
        self._check_currency(currency)

        recipient = await self.clients.get_by_username(recipient_username)
        if recipient is None:
            raise RecipientNotFoundError(recipient_username)
        if recipient.id == sender_id:
            raise InvalidRecipientError()

        sender_account = await self.accounts.get(sender_id, currency)
        if sender_account is None:
            raise AccountNotFoundError(sender_id, currency, "Sender account not found")
        self._check_funds(sender_account, amount)

        recipient_account = await self.accounts.get_or_create(recipient.id, currency)
        new_sender_balance = quantize_money(to_decimal(sender_account.balance) - amount)
        new_recipient_balance = quantize_money(to_decimal(recipient_account.balance) + amount)

        await self.accounts.set_balance(sender_account, new_sender_balance)
        await self.accounts.set_balance(recipient_account, new_recipient_balance)

        message = message or None
        await self.transactions.add_transaction(
            client_id=sender_id,
            type=TransactionType.TRANSFER.value,
            amount=amount,
            currency_from=currency,
            currency_to=currency,
            receiver_id=recipient.id,
            message=message,
        )
        await self.transactions.add_transaction(
            client_id=recipient.id,
            type=TransactionType.RECEIVED.value,
            amount=amount,
            currency_from=currency,
            currency_to=currency,
            receiver_id=sender_id,
            message=message,
        )

        logger.info("Client %s transferred %s %s to %s", sender_id, amount, currency, recipient.id)
        return TransferResult(recipient=recipient.public_identity(), new_balance=new_sender_balance)

    @staticmethod
    def _checked_amount(amount: Decimal | int | str) -> Decimal:
        value = to_decimal(amount)
        if not value.is_finite() or value <= 0:
            raise InvalidAmountError()
        value = quantize_money(value)
        if value <= 0:
            raise InvalidAmountError("Amount must be at least 0.01")
        return value

    @staticmethod
    def _check_currency(currency: str) -> None:
        if not is_supported_currency(currency):
            raise UnsupportedCurrencyError(currency)

    @staticmethod
    def _check_funds(account: AccountModel, amount: Decimal) -> None:
        available = to_decimal(account.balance)
        if available < amount:
            raise InsufficientBalanceError(account.currency, available, amount)
