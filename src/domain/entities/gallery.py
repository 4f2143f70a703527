from typing import Optional

from sqlmodel import Field, SQLModel


class Gallery(SQLModel, table=True):
    """Gallery entity - a titled collection owned by one user"""

    __tablename__ = "galleries"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    title: str = Field(max_length=255)
