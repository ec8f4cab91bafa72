"""Unassigned player roster.

Players waiting to be seated live here, keyed by name (names are unique among
unassigned players, and a name can be seated only once). Placing a player
moves it from the roster onto the board; removing a placed player hands it
back. The board itself does not check player names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seating_engine import Board, Footprint, Item, Result
from seating_engine.types import KIND_PLAYER

from .catalogs import DEFAULT_PLAYER_SIZE, PLAYER_SIZES

log = logging.getLogger(__name__)


@dataclass
class RosterPlayer:
    name: str
    size: str = DEFAULT_PLAYER_SIZE


@dataclass(frozen=True)
class RosterStats:
    total: int
    unassigned: int
    placed: int


def parse_keep_size(text: str) -> str:
    """Map a free-form keep size ("3", "3x3", "Lv 3", ...) to a player size.

    Anything mentioning a 3 is a 3x3 keep; everything else is 2x2.
    """
    return "3x3" if "3" in (text or "") else "2x2"


class Roster:
    def __init__(self) -> None:
        self._players: dict[str, RosterPlayer] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: str) -> bool:
        return name in self._players

    def get(self, name: str) -> RosterPlayer | None:
        return self._players.get(name)

    def players(self) -> list[RosterPlayer]:
        """Unassigned players, alphabetically."""
        return sorted(self._players.values(), key=lambda p: p.name.casefold())

    def add(self, name: str, size: str = DEFAULT_PLAYER_SIZE) -> RosterPlayer:
        name = (name or "").strip()
        if not name:
            raise ValueError("Player name must not be empty")
        if name in self._players:
            raise ValueError(f"Player already exists: {name!r}")
        if size not in PLAYER_SIZES:
            raise ValueError(
                f"Unsupported keep size {size!r}; expected one of "
                f"{', '.join(PLAYER_SIZES)}"
            )
        player = RosterPlayer(name=name, size=size)
        self._players[name] = player
        return player

    def discard(self, name: str) -> RosterPlayer | None:
        return self._players.pop(name, None)

    def place(self, board: Board, name: str, row: int, col: int) -> Result:
        """Seat an unassigned player with its top-left cell at (row, col).

        The player leaves the roster only if the placement succeeds.
        """
        player = self._players.get(name)
        if player is None:
            raise ValueError(f"No unassigned player named {name!r}")
        if any(it.is_player and it.name == name for it in board.all_items()):
            raise ValueError(f"A player named {name!r} is already seated")
        result = board.try_place(
            Footprint.from_size(row, col, player.size),
            KIND_PLAYER,
            name=player.name,
        )
        if result.ok:
            del self._players[name]
        return result

    def give_back(self, item: Item) -> RosterPlayer | None:
        """Return a removed player item to the roster.

        A player whose name is taken by an unassigned player comes back
        under a numbered name ("Alice (2)") rather than being dropped.
        """
        if not item.is_player:
            return None
        name = self._free_name(item.name)
        if name != item.name:
            log.warning(
                "Player %r returned as %r: name already unassigned",
                item.name,
                name,
            )
        player = RosterPlayer(name=name, size=item.size)
        self._players[name] = player
        return player

    def _free_name(self, name: str) -> str:
        candidate = name
        n = 2
        while candidate in self._players:
            candidate = f"{name} ({n})"
            n += 1
        return candidate

    def unplace(self, board: Board, item_id: int) -> Result:
        """Remove a placed item; players go back to the roster."""
        result = board.remove(item_id)
        if result.ok:
            self.give_back(result.item)
        return result

    def delete(self, board: Board, name: str) -> int:
        """Forget a player entirely, including any seats they hold.

        Returns the number of placed items removed from the board.
        """
        self._players.pop(name, None)
        removed = 0
        for item in board.all_items():
            if item.is_player and item.name == name:
                if board.remove(item.id).ok:
                    removed += 1
        return removed

    def delete_all(self, board: Board) -> int:
        """Forget every player, unassigned and placed."""
        self._players.clear()
        removed = 0
        for item in board.all_items():
            if item.is_player and board.remove(item.id).ok:
                removed += 1
        log.info("Deleted all players (%d seated)", removed)
        return removed

    def clear_board(self, board: Board) -> list[Item]:
        """Clear everything but the alliance city; players return here."""
        removed = board.clear(keep_fixed=True)
        for item in removed:
            self.give_back(item)
        return removed

    def stats(self, board: Board) -> RosterStats:
        placed = board.count(kind=KIND_PLAYER)
        return RosterStats(
            total=len(self._players) + placed,
            unassigned=len(self._players),
            placed=placed,
        )
