"""
SimUDuck: duck types whose flying is delegated to a swappable behaviour.

Each concrete duck picks a default ``FlyBehaviour``; the behaviour can be
replaced on a live instance through the ``fly_behaviour`` property.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from patternlab.simuduck.behaviours import FlyBehaviour, FlyNoWay, FlyWithWings

logger = logging.getLogger(__name__)


class UnknownDuckError(ValueError):
    pass


class Duck(ABC):
    kind: ClassVar[str] = ""

    def __init__(self, fly_behaviour: FlyBehaviour) -> None:
        self.fly_behaviour = fly_behaviour

    @abstractmethod
    def display(self) -> str:
        ...

    def perform_fly(self) -> str:
        return self._fly_behaviour.fly()

    @property
    def fly_behaviour(self) -> FlyBehaviour:
        return self._fly_behaviour

    @fly_behaviour.setter
    def fly_behaviour(self, fly_behaviour: FlyBehaviour) -> None:
        if not isinstance(fly_behaviour, FlyBehaviour):
            raise TypeError(f"fly_behaviour must be a FlyBehaviour, got {type(fly_behaviour).__name__}")
        logger.debug("%s flies using %s", type(self).__name__, type(fly_behaviour).__name__)
        self._fly_behaviour = fly_behaviour

    def __repr__(self) -> str:
        return f"<{self.display()} fly={type(self._fly_behaviour).__name__}>"


class MallardDuck(Duck):
    kind = "mallard"

    def __init__(self) -> None:
        super().__init__(FlyWithWings())

    def display(self) -> str:
        return "MallardDuck"


class RedheadDuck(Duck):
    kind = "redhead"

    def __init__(self) -> None:
        super().__init__(FlyWithWings())

    def display(self) -> str:
        return "RedheadDuck"


class RubberDuck(Duck):
    kind = "rubber"

    def __init__(self) -> None:
        super().__init__(FlyNoWay())

    def display(self) -> str:
        return "RubberDuck"


class WoodenDuck(Duck):
    kind = "wooden"

    def __init__(self) -> None:
        super().__init__(FlyNoWay())

    def display(self) -> str:
        return "WoodenDuck"


DUCK_TYPES: dict[str, type[Duck]] = {
    cls.kind: cls for cls in (MallardDuck, RedheadDuck, RubberDuck, WoodenDuck)
}


def available_ducks() -> list[str]:
    return sorted(DUCK_TYPES)


def create_duck(kind: str) -> Duck:
    """
    Build a duck from its kind, e.g. ``"mallard"`` or ``"wooden"``.

    Raises:
        UnknownDuckError: No duck of that kind exists.
    """
    normalized = kind.strip().lower()
    if normalized.endswith("_duck"):
        normalized = normalized[: -len("_duck")]
    duck_type = DUCK_TYPES.get(normalized)
    if duck_type is None:
        raise UnknownDuckError(f"Unknown duck '{kind}'. Available: {available_ducks()}")
    return duck_type()
