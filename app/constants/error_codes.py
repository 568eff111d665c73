# app/constants/error_codes.py

from enum import Enum


class ErrorCode(str, Enum):
    # ---------------- GENERIC ----------------
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # ---------------- BRANCHES ----------------
    BRANCH_NOT_FOUND = "BRANCH_NOT_FOUND"
    BRANCH_CODE_EXISTS = "BRANCH_CODE_EXISTS"

    # ---------------- PRODUCTS ----------------
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    PRODUCT_SKU_EXISTS = "PRODUCT_SKU_EXISTS"

    # ---------------- STOCK TRANSFERS ----------------
    STOCK_TRANSFER_INVALID_BRANCH = "STOCK_TRANSFER_INVALID_BRANCH"
    STOCK_TRANSFER_INVALID_PRODUCT = "STOCK_TRANSFER_INVALID_PRODUCT"
    STOCK_TRANSFER_INSUFFICIENT_STOCK = "STOCK_TRANSFER_INSUFFICIENT_STOCK"
