from pydantic import BaseModel, Field
from datetime import datetime
from app.models.enums.stock_transfer_status import TransferStatus


class StockTransferCreate(BaseModel):
    product_id: str
    from_branch_id: str
    to_branch_id: str
    quantity: int = Field(gt=0)


class StockTransferOut(BaseModel):
    id: str
    product_name: str
    from_branch: str
    to_branch: str
    quantity: int
    status: TransferStatus
    created_at: datetime
