"""SQLAlchemy ORM models for owners, pets and pet types."""

from datetime import date

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.infrastructure.database.base import Base


class PetTypeModel(Base):
    """ORM model — maps to the 'types' table (cat, dog, ...)."""

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<PetTypeModel(id={self.id}, name='{self.name}')>"


class OwnerModel(Base):
    """ORM model — maps to the 'owners' table."""

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(80), nullable=False, default="")
    telephone: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    pets: Mapped[list["PetModel"]] = relationship(
        back_populates="owner",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="PetModel.name",
    )

    def __repr__(self) -> str:
        return f"<OwnerModel(id={self.id}, name='{self.first_name} {self.last_name}')>"


class PetModel(Base):
    """ORM model — maps to the 'pets' table."""

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    type_id: Mapped[int | None] = mapped_column(ForeignKey("types.id"), nullable=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True,
    )

    type: Mapped[PetTypeModel | None] = relationship(lazy="selectin")
    owner: Mapped[OwnerModel] = relationship(back_populates="pets")
    visits: Mapped[list["VisitModel"]] = relationship(  # noqa: F821
        back_populates="pet",
        lazy="selectin",
        order_by="VisitModel.visit_date",
    )

    def __repr__(self) -> str:
        return f"<PetModel(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
