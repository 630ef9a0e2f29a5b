from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quickestimate.db.base import BaseModel, JSONType


class Lead(BaseModel):
    __tablename__ = "leads"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    zip: Mapped[str] = mapped_column(String(10), nullable=False)
    project_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    photos: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    inputs: Mapped[dict] = mapped_column(JSONType, nullable=False)
    estimate: Mapped[dict] = mapped_column(JSONType, nullable=False)
