"""Pydantic schemas for Post."""
from pydantic import BaseModel


class PostCreate(BaseModel):
    # Title and content are stored as typed, no validation
    title: str = ""
    content: str = ""
