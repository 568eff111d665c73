# app/schemas/pharmacies/pharmacy_schemas.py

from pydantic import BaseModel
from typing import List
from decimal import Decimal


class PharmacyListing(BaseModel):
    id: str
    name: str
    address: str
    phone: str
    rating: Decimal
    operating_hours: str


class PharmacyListData(BaseModel):
    total: int
    items: List[PharmacyListing]
