from enum import Enum


class ExportStatus(Enum):
    """
    Non-error outcomes of an export. Failures are raised as DeliveryFailure.
    """
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
