from sqlalchemy import Column, Integer, String, Float, Numeric, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.core.database import Base

# Largest value an INTEGER primary key can hold (SQLite and BIGINT)
MAX_ID = 2 ** 63 - 1


def is_storable_id(value: int) -> bool:
    return 0 < value <= MAX_ID


class Property(Base):
    """Property listing that exclusively owns its spaces"""
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Basic property information
    address = Column(String(500), nullable=False)
    type = Column(String(50), nullable=False)  # house, apartment, condo
    price = Column(Numeric(12, 2, asdecimal=False), nullable=False)  # currency units
    description = Column(Text)

    # Relationships
    spaces = relationship(
        "Space",
        back_populates="property",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Space.id",
    )

    # Indexes for performance
    __table_args__ = (
        Index('idx_properties_type', 'type'),
        Index('idx_properties_price', 'price'),
    )


class Space(Base):
    """Room or sub-area of a property"""
    __tablename__ = "spaces"

    id = Column(Integer, primary_key=True, autoincrement=True)

    property_id = Column(Integer, ForeignKey('properties.id', ondelete='CASCADE'), nullable=False)

    type = Column(String(50), nullable=False)  # bedroom, kitchen, bathroom, living room
    size = Column(Float, nullable=False)  # in square feet
    description = Column(Text)

    # Relationships
    property = relationship("Property", back_populates="spaces")

    # Indexes
    __table_args__ = (
        Index('idx_spaces_type', 'type'),
        Index('idx_spaces_size', 'size'),
        Index('idx_spaces_property_id', 'property_id'),
    )
