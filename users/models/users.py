from sqlmodel import SQLModel, Field
from datetime import date

class User(SQLModel):
    id: int | None = Field(default=None)
    email: str | None = None
    login: str | None = None
    name: str | None = None  # falls back to login when empty
    birthday: date | None = None
