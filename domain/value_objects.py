"""Domain Value Objects"""
from pydantic import BaseModel


class Client(BaseModel):
    """Value Object for a hotel guest.

    The name is the booking key: two clients sharing a name are the same
    client as far as the ledger is concerned.
    """
    name: str
    age: int
    height: int

    class Config:
        frozen = True
