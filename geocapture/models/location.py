from sqlalchemy import Column, DateTime, Float, Integer, Text
from sqlalchemy.sql import func

from geocapture.models.base import Base


class Location(Base):
    # Table and column names are shared with databases created by earlier deployments.
    __tablename__ = "Location"

    id = Column(Integer, primary_key=True, autoincrement=True)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    accuracy = Column(Float, nullable=True)
    user_agent = Column("userAgent", Text, nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Location id={self.id} lat={self.lat} lng={self.lng}>"
