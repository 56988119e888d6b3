from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, create_engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class FuelType(str, Enum):
    """Fuel grades offered at the pump."""

    BENZIN_95 = "Benzin-95"
    BENZIN_97 = "Benzin-97"
    DIZEL = "Dizel"
    EURO_DIZEL = "Euro-Dizel"
    LPG = "LPG"
    OTHER = "Other"

    @classmethod
    def normalize(cls, label):
        """Map a free-text label onto a known grade, OTHER when unknown."""
        if not label:
            return cls.OTHER
        for member in cls:
            if member.value.lower() == str(label).strip().lower():
                return member
        return cls.OTHER


class TimeFrame(str, Enum):
    """Granularity of the analytics period filter."""

    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class FuelEntry(Base):
    """One refueling event."""

    __tablename__ = 'fuel_entries'

    id = Column(Integer, primary_key=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    fuel_type = Column(String(32), nullable=False, default=FuelType.BENZIN_95.value)
    liters = Column(Float, nullable=False, default=0.0)
    price_per_liter = Column(Float, nullable=False, default=0.0)
    total_amount = Column(Float, nullable=False, default=0.0)
    odometer = Column(Float, nullable=False, default=0.0)
    distance = Column(Float)  # odometer delta since the previous entry
    station = Column(String(120), nullable=False, default="")
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)

    def __repr__(self):
        return f"<FuelEntry id={self.id} date={self.date} liters={self.liters}>"

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat() if self.date else None,
            'fuel_type': self.fuel_type,
            'liters': self.liters,
            'price_per_liter': self.price_per_liter,
            'total_amount': self.total_amount,
            'odometer': self.odometer,
            'distance': self.distance,
            'station': self.station,
            'notes': self.notes,
        }


def get_engine(database_url):
    """Create database engine."""
    return create_engine(database_url, pool_pre_ping=True)
