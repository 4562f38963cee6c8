# finance_tracker/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the finance tracker data model.
"""

from .enum_export_format import ExportFormat
from .enum_export_scope import ExportScope
from .enum_export_status import ExportStatus
from .enum_transaction_status import TransactionStatus
from .enum_transaction_type import TransactionType
from .i_delivery import Cancelled, Delivered, DeliveryResult, IDelivery
from .i_parser_emitter import IParserEmitter
from .i_to_dict import IToDict, JsonValue
from .i_transaction import ITransaction

__all__ = [
    "ExportFormat",
    "ExportScope",
    "ExportStatus",
    "TransactionStatus",
    "TransactionType",
    "Cancelled",
    "Delivered",
    "DeliveryResult",
    "IDelivery",
    "IParserEmitter",
    "IToDict",
    "JsonValue",
    "ITransaction",
]
