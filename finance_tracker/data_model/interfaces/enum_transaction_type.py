from enum import Enum


class TransactionType(Enum):
    """
    Direction of a transaction. The amount is always stored as a magnitude;
    the type alone decides whether it adds to income or to expenses.
    """
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_value(cls, value: object) -> "TransactionType":
        """
        Convert 'income'/'expense' (any case, surrounding whitespace allowed)
        or an existing member to a TransactionType.
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown transaction type: {value!r}")

    def __str__(self) -> str:
        return self.value
