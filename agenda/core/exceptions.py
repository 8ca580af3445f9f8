"""Custom exceptions for the application"""
from fastapi import HTTPException

class NotFoundException(HTTPException):
    def __init__(self, resource: str):
        super().__init__(status_code=404, detail=f"{resource} not found")

class StorageError(Exception):
    """Raised by a storage backend that cannot read or write a slot"""
