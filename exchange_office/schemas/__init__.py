"""Pydantic schemas used across the project.

JSON bodies use camelCase keys; money and rates are serialized as strings.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from exchange_office.core.money import Currency


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


PositiveAmount = Annotated[Decimal, Field(gt=0, max_digits=15, decimal_places=2)]


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)


class ClientResponse(CamelModel):
    id: str
    username: str
    name: str


class LoginResponse(CamelModel):
    token: str
    client: ClientResponse


class TokenData(BaseModel):
    client_id: str
    username: Optional[str] = None


class AccountResponse(CamelModel):
    id: str
    currency: str
    balance: Decimal


class ExchangeRequest(CamelModel):
    from_currency: Currency
    to_currency: Currency
    amount: PositiveAmount


class ExchangeResponse(CamelModel):
    success: bool = True
    exchange_rate: Decimal
    converted_amount: Decimal
    new_balances: dict[str, Decimal]


class TransferRequest(CamelModel):
    recipient_username: str = Field(..., min_length=3, max_length=50)
    currency: Currency
    amount: PositiveAmount
    message: Optional[str] = Field(default=None, max_length=500)


class RecipientResponse(CamelModel):
    username: str
    name: str


class TransferResponse(CamelModel):
    success: bool = True
    recipient: RecipientResponse
    new_balance: Decimal


class TransactionResponse(CamelModel):
    id: str
    client_id: str
    type: str
    amount: Decimal
    currency_from: Optional[str] = None
    currency_to: Optional[str] = None
    receiver_id: Optional[str] = None
    exchange_rate: Optional[Decimal] = None
    message: Optional[str] = None
    created_at: datetime


class ExchangeRateResponse(CamelModel):
    id: str
    base_currency: str
    target_currency: str
    rate: Decimal
    updated_at: Optional[datetime] = None


class RateResponse(CamelModel):
    rate: Decimal


class CurrencyShareResponse(CamelModel):
    currency: str
    count: int
    volume: Decimal


class MonthlyActivityResponse(CamelModel):
    month: str
    exchanges: int
    transfers: int
    volume: Decimal


class PairRateResponse(CamelModel):
    pair: str
    avg_rate: Decimal
    count: int


class TrendsResponse(CamelModel):
    transaction_trend: int
    volume_trend: Decimal


class AnalyticsResponse(CamelModel):
    total_transactions: int
    total_exchange_volume: Decimal
    total_transfer_volume: Decimal
    average_transaction_value: Decimal
    most_active_month: str
    currency_distribution: list[CurrencyShareResponse]
    monthly_activity: list[MonthlyActivityResponse]
    exchange_rate_efficiency: list[PairRateResponse]
    recent_trends: TrendsResponse


class HealthResponse(CamelModel):
    status: str = "ok"
    version: str
