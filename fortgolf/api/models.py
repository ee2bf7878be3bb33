"""
SQLAlchemy models for the results archive.
Rows are written as contests progress and read only for listing; a live game is never rebuilt from them.
"""

from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String, Text

from .database import Base


class GameRecord(Base):
    __tablename__ = "game_records"

    id = Column(String(36), primary_key=True)  # uuid, same as the live game id
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    mode = Column(String(16), nullable=False)  # elimination | siege
    num_players = Column(Integer, nullable=False)
    max_health = Column(Integer, nullable=False)
    total_holes = Column(Integer, nullable=False)
    status = Column(String(16), nullable=False, default="active")  # active | finished
    players = Column(Text, nullable=False)  # JSON array of player snapshots
    history = Column(Text, nullable=False)  # JSON array of hole summaries
    winners = Column(Text, nullable=True)  # JSON array of winner names once finished
