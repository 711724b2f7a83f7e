"""SQLAlchemy ORM models for vets and their specialties."""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.infrastructure.database.base import Base

vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True),
    Column("specialty_id", ForeignKey("specialties.id", ondelete="CASCADE"), primary_key=True),
)


class SpecialtyModel(Base):
    """ORM model — maps to the 'specialties' table."""

    __tablename__ = "specialties"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)


class VetModel(Base):
    """ORM model — maps to the 'vets' table."""

    __tablename__ = "vets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    specialties: Mapped[list[SpecialtyModel]] = relationship(
        secondary=vet_specialties,
        lazy="selectin",
        order_by=SpecialtyModel.name,
    )

    def __repr__(self) -> str:
        return f"<VetModel(id={self.id}, name='{self.first_name} {self.last_name}')>"
