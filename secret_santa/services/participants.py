from __future__ import annotations

import random
from typing import Any, Iterable, Sequence

from loguru import logger

from .assignments import Assignment, PairingStrategy, generate_assignment


class ParticipantStore:
    """
    Ordered participant list plus the assignment drawn for it.

    The assignment is cached and dropped on every mutation, so reading it
    twice without a change in between returns the same pairing.
    """

    def __init__(
        self,
        participants: Iterable[str] = (),
        targets: Sequence[int | None] | None = None,
        *,
        rng: random.Random | None = None,
        strategy: PairingStrategy | str = PairingStrategy.CYCLE,
        max_attempts: int = 1000,
        max_participants: int | None = None,
    ) -> None:
        self._participants: list[str] = list(participants)
        self._rng = rng
        self._strategy = PairingStrategy(strategy)
        self._max_attempts = max_attempts
        self._max_participants = max_participants
        self._assignment: Assignment | None = None

        if targets is not None and len(targets) == len(self._participants):
            self._assignment = Assignment(
                participants=tuple(self._participants),
                targets=tuple(targets),
            )

    def __len__(self) -> int:
        return len(self._participants)

    @property
    def is_full(self) -> bool:
        return self._max_participants is not None and len(self) >= self._max_participants

    @property
    def participants(self) -> tuple[str, ...]:
        return tuple(self._participants)

    @property
    def assignment(self) -> Assignment:
        if self._assignment is None:
            self._assignment = generate_assignment(
                self._participants,
                rng=self._rng,
                strategy=self._strategy,
                max_attempts=self._max_attempts,
            )
        return self._assignment

    def append(self, name: str) -> None:
        name = (name or "").strip()
        if not name:
            raise ValueError("Participant name must not be empty.")
        if self.is_full:
            raise ValueError(f"The list is limited to {self._max_participants} participants.")
        self._participants.append(name)
        self._assignment = None
        logger.info("added participant {name} ({count} total)", name=name, count=len(self))

    def remove_at(self, index: int) -> str:
        if not 0 <= index < len(self._participants):
            raise IndexError(f"No participant at position {index}.")
        name = self._participants.pop(index)
        self._assignment = None
        logger.info("removed participant {name} ({count} left)", name=name, count=len(self))
        return name

    def to_dict(self) -> dict[str, Any]:
        return {
            "participants": list(self._participants),
            "targets": list(self._assignment.targets) if self._assignment else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None, **kwargs: Any) -> "ParticipantStore":
        data = data or {}
        return cls(data.get("participants") or (), data.get("targets"), **kwargs)
