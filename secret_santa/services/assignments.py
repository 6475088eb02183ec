from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from loguru import logger


class AssignmentError(RuntimeError):
    pass


class PairingStrategy(str, Enum):
    CYCLE = "cycle"
    REJECTION = "rejection"
    GREEDY = "greedy"


@dataclass(frozen=True)
class Assignment:
    """
    Giver -> recipient pairing over an ordered participant list.

    targets[i] is the list index of the person participants[i] gives to,
    or None while the list cannot be paired.
    """
    participants: tuple[str, ...]
    targets: tuple[int | None, ...]

    def recipient_of(self, index: int) -> str | None:
        target = self.targets[index]
        return None if target is None else self.participants[target]

    def pairs(self) -> list[tuple[str, str | None]]:
        return [(name, self.recipient_of(i)) for i, name in enumerate(self.participants)]

    def as_dict(self) -> dict[str, str | None]:
        return dict(self.pairs())

    @property
    def is_complete(self) -> bool:
        return all(t is not None for t in self.targets)


def _single_cycle(n: int, rng: random.Random) -> list[int]:
    # Sattolo's shuffle: uniform over permutations made of one n-cycle
    order = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randrange(i)
        order[i], order[j] = order[j], order[i]
    return order


def _rejection(n: int, rng: random.Random, max_attempts: int) -> list[int]:
    ids = list(range(n))
    assigned = ids[:]
    for _ in range(max_attempts):
        rng.shuffle(assigned)
        if all(a != b for a, b in zip(ids, assigned)):
            return assigned
    raise AssignmentError(f"No derangement found after {max_attempts} shuffles.")


def _greedy(n: int, rng: random.Random, max_attempts: int) -> list[int]:
    for attempt in range(1, max_attempts + 1):
        pool = list(range(n))
        targets: list[int] = []
        for giver in range(n):
            candidates = [r for r in pool if r != giver]
            if not candidates:
                logger.debug("greedy walk stranded participant {giver} on attempt {attempt}", giver=giver, attempt=attempt)
                break
            receiver = rng.choice(candidates)
            targets.append(receiver)
            pool.remove(receiver)
        else:
            return targets
    raise AssignmentError(f"Greedy draw stranded the last participant {max_attempts} times.")


def generate_assignment(
    participants: Sequence[str],
    rng: random.Random | None = None,
    strategy: PairingStrategy | str = PairingStrategy.CYCLE,
    max_attempts: int = 1000,
) -> Assignment:
    """
    Pair every participant with another one when the list length is even.

    Odd lists (and the empty list) come back with every entry unassigned.
    Self-assignment is judged by position, so duplicate names are distinct.
    """
    people = tuple(participants)
    strategy = PairingStrategy(strategy)
    n = len(people)

    if n % 2 == 1 or n == 0:
        return Assignment(participants=people, targets=(None,) * n)

    rng = rng or random.Random()
    if strategy is PairingStrategy.CYCLE:
        targets = _single_cycle(n, rng)
    elif strategy is PairingStrategy.REJECTION:
        targets = _rejection(n, rng, max_attempts)
    else:
        targets = _greedy(n, rng, max_attempts)

    logger.debug("drew {n} pairs using {strategy}", n=n, strategy=strategy.value)
    return Assignment(participants=people, targets=tuple(targets))
