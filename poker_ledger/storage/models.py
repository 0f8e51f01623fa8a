from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from poker_ledger.storage.database import Base


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)


class GameDay(Base):
    __tablename__ = "game_days"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    played_on: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    results: Mapped[list["GameResult"]] = relationship(back_populates="game_day", cascade="all, delete-orphan")


class GameResult(Base):
    __tablename__ = "game_results"
    __table_args__ = (UniqueConstraint("game_day_id", "player_name", name="uq_game_results_day_player"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    game_day_id: Mapped[int] = mapped_column(ForeignKey("game_days.id"), nullable=False, index=True)
    player_name: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    net: Mapped[int] = mapped_column(Integer, nullable=False)

    game_day: Mapped[GameDay] = relationship(back_populates="results")
