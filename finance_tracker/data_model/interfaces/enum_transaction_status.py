from enum import Enum


class TransactionStatus(Enum):
    """
    Enum representing the posting status of a transaction.
    """
    POSTED = "posted"
    PENDING = "pending"

    @classmethod
    def from_value(cls, value: object) -> "TransactionStatus":
        """
        Convert a status string to a TransactionStatus. Blank means posted.
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        if text == "":
            return cls.POSTED
        for status in cls:
            if status.value == text:
                return status
        raise ValueError(f"Unknown transaction status: {value!r}")

    def __str__(self) -> str:
        return self.value
