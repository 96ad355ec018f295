from receipt_parser.structuring.base import BaseStructurer
from receipt_parser.structuring.factory import StructurerFactory
from receipt_parser.structuring.structurer import Structurer

__all__ = ["BaseStructurer", "Structurer", "StructurerFactory"]
