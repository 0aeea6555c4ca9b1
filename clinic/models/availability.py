from sqlalchemy import Column, Integer, DateTime, Boolean
from sqlalchemy.sql import func

from ..core.database import Base

class Availability(Base):
    __tablename__ = "availability"
    
    id = Column(Integer, primary_key=True, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    
    # Set once an appointment is placed inside the slot
    is_booked = Column(Boolean, nullable=False, default=False)
    
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    
    def contains(self, start, end) -> bool:
        return self.start_time <= start and end <= self.end_time
    
    def __repr__(self):
        return f"<Availability(id={self.id}, doctor_id={self.doctor_id}, start='{self.start_time}', booked={self.is_booked})>"
