from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from poker_ledger.domain import DomainValidationError, HistoricalEntry, PlayerExistsError
from poker_ledger.storage.models import GameDay, GameResult, Player

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameDayRow:
    id: int
    played_on: date


class PokerRepository:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def add_player(self, name: str) -> int:
        with self._session_factory() as db:
            existing = db.scalars(select(Player.id).where(Player.name == name)).first()
            if existing is not None:
                raise PlayerExistsError(name)
            player = Player(name=name, balance=0)
            db.add(player)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise PlayerExistsError(name) from exc
            logger.info("Added player %s", name)
            return player.id

    def list_player_names(self) -> list[str]:
        with self._session_factory() as db:
            return list(db.scalars(select(Player.name).order_by(Player.id)).all())

    def list_balances(self) -> list[tuple[str, int]]:
        with self._session_factory() as db:
            rows = db.execute(select(Player.name, Player.balance).order_by(Player.balance.desc(), Player.id)).all()
            return [(row.name, int(row.balance)) for row in rows]

    def get_balance(self, name: str) -> int | None:
        with self._session_factory() as db:
            balance = db.scalars(select(Player.balance).where(Player.name == name)).first()
            return int(balance) if balance is not None else None

    def record_settlement(self, played_on: date, net: dict[str, int]) -> int:
        """Append one game day and add every net result to the player's balance."""
        with self._session_factory() as db:
            players = {
                player.name: player
                for player in db.scalars(select(Player).where(Player.name.in_(list(net)))).all()
            }
            unknown = [name for name in net if name not in players]
            if unknown:
                raise DomainValidationError(f"unknown players: {', '.join(unknown)}")

            game_day = GameDay(played_on=played_on)
            db.add(game_day)
            db.flush()
            db.add_all([GameResult(game_day_id=game_day.id, player_name=name, net=amount) for name, amount in net.items()])
            for name, amount in net.items():
                players[name].balance += amount

            db.commit()
            logger.info("Recorded game day %s (%s) for %d players", game_day.id, played_on, len(net))
            return game_day.id

    def list_game_days(self) -> list[GameDayRow]:
        with self._session_factory() as db:
            rows = db.scalars(select(GameDay).order_by(GameDay.played_on, GameDay.id)).all()
            return [GameDayRow(id=row.id, played_on=row.played_on) for row in rows]

    def get_results_by_day(self, game_day_id: int) -> list[tuple[str, int]] | None:
        with self._session_factory() as db:
            if db.get(GameDay, game_day_id) is None:
                return None
            rows = db.execute(
                select(GameResult.player_name, GameResult.net)
                .where(GameResult.game_day_id == game_day_id)
                .order_by(GameResult.net.desc(), GameResult.id)
            ).all()
            return [(row.player_name, int(row.net)) for row in rows]

    def get_player_history(self, name: str) -> list[HistoricalEntry]:
        with self._session_factory() as db:
            rows = db.execute(
                select(GameDay.played_on, GameResult.net)
                .join(GameDay, GameDay.id == GameResult.game_day_id)
                .where(GameResult.player_name == name)
                .order_by(GameDay.played_on, GameDay.id)
            ).all()
            return [HistoricalEntry(date=row.played_on, net_result=int(row.net)) for row in rows]

    def get_all_histories(self) -> dict[str, tuple[int, list[HistoricalEntry]]]:
        """Every roster player's current balance and game history, keyed by name."""
        with self._session_factory() as db:
            players = db.execute(select(Player.name, Player.balance).order_by(Player.id)).all()
            rows = db.execute(
                select(GameResult.player_name, GameDay.played_on, GameResult.net)
                .join(GameDay, GameDay.id == GameResult.game_day_id)
                .order_by(GameDay.played_on, GameDay.id)
            ).all()

            histories: dict[str, list[HistoricalEntry]] = defaultdict(list)
            for row in rows:
                histories[row.player_name].append(HistoricalEntry(date=row.played_on, net_result=int(row.net)))

            return {player.name: (int(player.balance), histories.get(player.name, [])) for player in players}
