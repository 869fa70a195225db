from sqlmodel import SQLModel, Field
from datetime import date


class Film(SQLModel):
    id: int | None = Field(default=None)
    name: str | None = None
    description: str | None = None
    release_date: date | None = Field(default=None, alias="releaseDate")
    duration: int | None = None
