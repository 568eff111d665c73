import enum


class TransferStatus(str, enum.Enum):
    pending = "pending"
    completed = "completed"
    cancelled = "cancelled"


class AdjustmentType(str, enum.Enum):
    transfer = "transfer"
