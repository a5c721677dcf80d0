"""
Transaction — Модель денежной транзакции

Immutable Pydantic модель: идентификатор, сумма и момент времени с таймзоной.
Операции, "меняющие" транзакцию, возвращают новый экземпляр.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# TRANSACTION MODEL
# =============================================================================


class Transaction(BaseModel):
    """
    Модель транзакции.

    Immutable модель (frozen=True). Сравнение структурное, по всем полям.
    """

    id: str = Field(..., description="Идентификатор транзакции")
    amount: int = Field(..., description="Сумма (целое, может быть отрицательной)")
    date_time: datetime = Field(..., description="Момент транзакции (с таймзоной)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("date_time")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Проверка, что время привязано к таймзоне"""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError(f"date_time {v.isoformat()} must be timezone-aware")
        return v

    def reduce_by(self, amount: int) -> "Transaction":
        """
        Уменьшение суммы транзакции.

        Args:
            amount: На сколько уменьшить сумму

        Returns:
            Новая транзакция с amount = self.amount - amount
        """
        return Transaction(
            id=self.id,
            amount=self.amount - amount,
            date_time=self.date_time,
        )

    def is_after(self, other: "Transaction") -> bool:
        """
        Проверка, что транзакция строго позже другой.

        Returns:
            True если момент self.date_time позже other.date_time
        """
        return self.date_time > other.date_time
