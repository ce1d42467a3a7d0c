from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class FlyBehaviour(ABC):
    name: ClassVar[str] = ""

    @abstractmethod
    def fly(self) -> str:
        ...


class FlyWithWings(FlyBehaviour):
    name = "wings"

    def fly(self) -> str:
        return "Fly with Wings"


class FlyNoWay(FlyBehaviour):
    name = "no_way"

    def fly(self) -> str:
        return "Can't fly"


FLY_BEHAVIOURS: dict[str, type[FlyBehaviour]] = {cls.name: cls for cls in (FlyWithWings, FlyNoWay)}
