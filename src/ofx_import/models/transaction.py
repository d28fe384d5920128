"""
Transaction models produced by the OFX import pipeline.
"""
import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class NormalizedTransaction(BaseModel):
    """
    A single statement line that passed minimum-viability validation.

    Only the civil date is kept; any time of day or timezone offset present in
    the source is dropped. The amount keeps its source sign. The transaction
    type code and external id are passed through verbatim for downstream
    collaborators (categorization, de-duplication).
    """
    date: datetime.date
    amount: Decimal
    description: str = ""
    transaction_type_code: str = Field(default="", alias="transactionTypeCode")
    external_id: Optional[str] = Field(default=None, alias="externalId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator('amount', mode='before')
    @classmethod
    def ensure_amount_is_decimal(cls, v: Any) -> Decimal:
        if not isinstance(v, Decimal):
            try:
                return Decimal(str(v))
            except Exception as e:
                raise ValueError(f"Invalid amount value: {v}. Could not convert to Decimal.") from e
        return v

    @field_serializer('amount', when_used='json')
    def serialize_amount(self, amount: Decimal) -> str:
        # Exact source digits, never a float
        return str(amount)

    def to_flat_map(self) -> Dict[str, Any]:
        """Serialize to plain JSON-compatible types using the camelCase aliases."""
        return self.model_dump(mode='json', by_alias=True)


class CandidateRecord(BaseModel):
    """
    A transaction block after field extraction and normalization but before
    validation. ``raw_amount`` is kept so that a legitimate zero amount can be
    told apart from a missing one.
    """
    date: Optional[datetime.date] = None
    amount: Decimal = Decimal(0)
    raw_amount: Optional[str] = None
    description: str = ""
    transaction_type_code: str = ""
    external_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def is_viable(self) -> bool:
        return self.date is not None and self.raw_amount is not None

    def to_transaction(self) -> NormalizedTransaction:
        if not self.is_viable():
            raise ValueError(f"Candidate is missing a date or amount: {self}")
        return NormalizedTransaction(
            date=self.date,
            amount=self.amount,
            description=self.description,
            transaction_type_code=self.transaction_type_code,
            external_id=self.external_id,
        )
