"""
Owner Entity

A catering business owner account.
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


class Owner(SQLModel, table=True):
    """
    Owner entity - the account that logs in and manages menus.

    Business Rules:
    - Email must be unique across all owners
    - Password stored as bcrypt hash
    """

    __tablename__ = "owner"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    phone_number: str = Field(default="", max_length=32)
    date_of_birth: Optional[date] = None
    password: str = Field(max_length=60)  # Bcrypt output is 60 chars
