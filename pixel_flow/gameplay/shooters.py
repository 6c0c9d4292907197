"""
Shooters - the colored, ammo-limited agents that ride the rail.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from uuid import uuid4

from .colors import ColorID
from .solver import ShooterManifest


class ShooterState(Enum):
    """Shooter lifecycle. RETIRED is terminal."""
    QUEUED = auto()    # Waiting in an inventory lane
    ACTIVE = auto()    # Orbiting the rail and firing
    RETIRED = auto()   # Out of ammo, dropped from play


@dataclass(frozen=True)
class ShooterView:
    """Read-only copy of a shooter for the presentation layer."""
    id: str
    color: ColorID
    ammo: int
    max_ammo: int
    rail_position: float
    state: ShooterState

    @property
    def ammo_ratio(self) -> float:
        """Return remaining ammo as 0.0 to 1.0."""
        return self.ammo / self.max_ammo if self.max_ammo > 0 else 0.0


@dataclass
class Shooter:
    """
    A shooter in the inventory or on the rail.

    Ammo only ever goes down; the shooter retires the moment it hits zero
    and is never reactivated.
    """
    color: ColorID
    ammo: int
    max_ammo: int
    rail_position: float = 0.0
    state: ShooterState = ShooterState.QUEUED
    order: int = 0
    id: str = field(default_factory=lambda: f"s-{uuid4().hex[:8]}")

    @classmethod
    def from_manifest(cls, entry: ShooterManifest, order: int = 0) -> 'Shooter':
        """`order` is the entry's position in the manifest."""
        return cls(color=entry.color, ammo=entry.ammo, max_ammo=entry.max_ammo, order=order)

    def activate(self, rail_position: float) -> bool:
        """
        Put a queued shooter on the rail.
        Returns True if activated, False if it was not queued.
        """
        if self.state != ShooterState.QUEUED:
            return False
        self.rail_position = rail_position
        self.state = ShooterState.ACTIVE
        return True

    def fire(self) -> bool:
        """
        Spend one shot.
        Returns True if a shot was spent, False if out of ammo.
        """
        if self.ammo <= 0:
            return False
        self.ammo -= 1
        return True

    def retire(self) -> None:
        self.state = ShooterState.RETIRED

    def view(self) -> ShooterView:
        return ShooterView(
            id=self.id,
            color=self.color,
            ammo=self.ammo,
            max_ammo=self.max_ammo,
            rail_position=self.rail_position,
            state=self.state,
        )
