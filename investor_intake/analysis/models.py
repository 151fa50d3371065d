from dataclasses import dataclass


@dataclass(frozen=True)
class StructuredRecord:
    """The three fields pulled out of an investor document."""

    name: str
    investment_amount: str
    address: str
