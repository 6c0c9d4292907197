"""
Inventory lanes - parallel FIFO queues of shooters awaiting deployment.
NO UI DEPENDENCIES.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Sequence, Tuple

from .shooters import Shooter, ShooterView
from .solver import ShooterManifest
from .constants import LANE_COUNT


@dataclass
class Lane:
    """
    A single inventory lane.

    Only the head of a lane may be deployed; order within a lane never changes.
    """
    index: int
    queue: Deque[Shooter] = field(default_factory=deque)

    def push(self, shooter: Shooter) -> None:
        self.queue.append(shooter)

    def head(self) -> Optional[Shooter]:
        """Return the next shooter to deploy, or None if empty."""
        return self.queue[0] if self.queue else None

    def pop(self) -> Optional[Shooter]:
        """Remove and return the head, or None if empty."""
        if not self.queue:
            return None
        return self.queue.popleft()

    def is_empty(self) -> bool:
        return not self.queue

    def __len__(self) -> int:
        return len(self.queue)


class Inventory:
    """
    Manages all lanes.
    Reference configuration has 4 lanes, filled round-robin from the manifest.
    """

    def __init__(self, lane_count: int = LANE_COUNT):
        if lane_count < 1:
            raise ValueError(f"Inventory needs at least one lane, got {lane_count}")
        self.lanes: List[Lane] = [Lane(index=i) for i in range(lane_count)]

    @classmethod
    def from_manifest(cls, manifest: Sequence[ShooterManifest], lane_count: int = LANE_COUNT) -> 'Inventory':
        """The i-th manifest entry goes to lane i mod lane_count."""
        inventory = cls(lane_count)
        for i, entry in enumerate(manifest):
            inventory.lanes[i % lane_count].push(Shooter.from_manifest(entry, order=i))
        return inventory

    @property
    def lane_count(self) -> int:
        return len(self.lanes)

    def get_lane(self, lane_index: int) -> Optional[Lane]:
        """Get a lane by index, or None if no such lane."""
        if not 0 <= lane_index < len(self.lanes):
            return None
        return self.lanes[lane_index]

    def head(self, lane_index: int) -> Optional[Shooter]:
        lane = self.get_lane(lane_index)
        if lane is None:
            return None
        return lane.head()

    def pop(self, lane_index: int) -> Optional[Shooter]:
        """
        Take the head of a lane.
        Returns None if the lane does not exist or is empty.
        """
        lane = self.get_lane(lane_index)
        if lane is None:
            return None
        return lane.pop()

    def next_in_order(self) -> Optional[int]:
        """Lane whose head comes earliest in the manifest, or None if all are empty."""
        heads = [lane for lane in self.lanes if not lane.is_empty()]
        if not heads:
            return None
        return min(heads, key=lambda lane: lane.head().order).index

    def is_empty(self) -> bool:
        return all(lane.is_empty() for lane in self.lanes)

    def snapshot(self) -> Tuple[Tuple[ShooterView, ...], ...]:
        return tuple(tuple(s.view() for s in lane.queue) for lane in self.lanes)
