from enum import Enum

class CollectionStatus(str, Enum):
    success = "success"
    failed = "failed"
    partial = "partial"
