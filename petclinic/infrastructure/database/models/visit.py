"""SQLAlchemy ORM model for the Visit entity."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.infrastructure.database.base import Base
from petclinic.infrastructure.database.models.owner import PetModel
from petclinic.infrastructure.database.models.vet import VetModel


class VisitModel(Base):
    """ORM model — maps to the 'visits' table."""

    __tablename__ = "visits"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    pet_id: Mapped[int] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    visit_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    vet_id: Mapped[int | None] = mapped_column(
        ForeignKey("vets.id", ondelete="SET NULL"), nullable=True,
    )
    aborted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    pet: Mapped[PetModel] = relationship(back_populates="visits")
    vet: Mapped[VetModel | None] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<VisitModel(id={self.id}, pet_id={self.pet_id}, "
            f"date={self.visit_date}, aborted={self.aborted})>"
        )
