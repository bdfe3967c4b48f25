"""Interstellar visitor spawning, lifecycle tracking and notifications."""
from __future__ import annotations

import enum
import math
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional

from orrery.catalog.interstellar import (
    EVENT_CONFIG,
    EventConfig,
    InterstellarKind,
    select_interstellar_kind,
)
from orrery.core.rng import SeededRandom
from orrery.engine.logger import OrreryLogger, channel_of
from orrery.generation.interstellar import generate_interstellar
from orrery.generation.models import InterstellarObject, Star
from orrery.world.positions import interstellar_position


class NotificationPriority(enum.Enum):
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class EventKind(enum.Enum):
    SPAWN = "spawn"
    PERIHELION = "perihelion"
    DESPAWN = "despawn"


HIGH_PRIORITY_KINDS = (InterstellarKind.ROGUE_BLACK_HOLE, InterstellarKind.PASSING_SYSTEM)


@dataclass
class Notification:
    id: int
    message: str
    priority: NotificationPriority
    time: float
    object: InterstellarObject
    read: bool = False


@dataclass
class EventRecord:
    kind: EventKind
    object: InterstellarObject
    time: float


def notification_text(kind: EventKind, obj: InterstellarObject) -> str:
    if kind is EventKind.SPAWN:
        return f"{obj.type_name} detected: {obj.name}"
    if kind is EventKind.PERIHELION:
        return f"{obj.name} at closest approach"
    return f"{obj.name} has left the system"


def notification_priority(kind: EventKind, obj: InterstellarObject) -> NotificationPriority:
    if kind is EventKind.SPAWN:
        if obj.kind in HIGH_PRIORITY_KINDS:
            return NotificationPriority.HIGH
        return NotificationPriority.NORMAL
    if kind is EventKind.PERIHELION:
        return NotificationPriority.NORMAL
    return NotificationPriority.LOW


class NotificationLog:
    """Most recent notifications; the oldest falls off once capacity is reached."""

    def __init__(self, capacity: int = EVENT_CONFIG.notification_capacity) -> None:
        self._items: Deque[Notification] = deque(maxlen=capacity)
        self._next_id = 1

    def __iter__(self) -> Iterator[Notification]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> Optional[int]:
        return self._items.maxlen

    def add(self, kind: EventKind, obj: InterstellarObject, time: float) -> Notification:
        notification = Notification(
            id=self._next_id,
            message=notification_text(kind, obj),
            priority=notification_priority(kind, obj),
            time=time,
            object=obj,
        )
        self._next_id += 1
        self._items.append(notification)
        return notification

    def unread(self) -> List[Notification]:
        return [item for item in self._items if not item.read]

    def mark_read(self, notification_id: int) -> bool:
        for item in self._items:
            if item.id == notification_id:
                item.read = True
                return True
        return False

    def mark_all_read(self) -> None:
        for item in self._items:
            item.read = True

    def clear(self) -> None:
        self._items.clear()
        self._next_id = 1


class EventLog:
    def __init__(self, capacity: int = EVENT_CONFIG.event_log_capacity) -> None:
        self._records: Deque[EventRecord] = deque(maxlen=capacity)

    def __iter__(self) -> Iterator[EventRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def record(self, kind: EventKind, obj: InterstellarObject, time: float) -> EventRecord:
        entry = EventRecord(kind, obj, time)
        self._records.append(entry)
        return entry

    def clear(self) -> None:
        self._records.clear()


class EventEngine:
    """Spawns visitors on a fixed cadence and retires them once they leave.

    Ordinary visitors and passing systems are tracked in separate lists with
    separate caps.  ``update`` is called every tick; the spawn roll only runs
    once per check interval, the lifecycle pass runs every time.
    """

    def __init__(
        self,
        rng: SeededRandom,
        config: EventConfig = EVENT_CONFIG,
        logger: Optional[OrreryLogger] = None,
    ) -> None:
        self.rng = rng
        self.config = config
        self._log = channel_of(logger, "events")
        self.active: List[InterstellarObject] = []
        self.passing_systems: List[InterstellarObject] = []
        self.notifications = NotificationLog(config.notification_capacity)
        self.history = EventLog(config.event_log_capacity)
        self.last_check = 0.0
        self._next_id = 1

    def objects(self) -> List[InterstellarObject]:
        return self.active + self.passing_systems

    def clear(self) -> None:
        self.active = []
        self.passing_systems = []
        self.notifications.clear()
        self.history.clear()
        self.last_check = 0.0
        self._next_id = 1

    # ------------------------------------------------------------------
    # Spawning
    # ------------------------------------------------------------------
    def _ordinary_full(self) -> bool:
        return len(self.active) >= self.config.max_active_objects

    def _passing_full(self) -> bool:
        return len(self.passing_systems) >= self.config.max_passing_systems

    def check(self, star: Star, time: float, time_scale: float = 1.0) -> Optional[InterstellarObject]:
        """Roll for a spawn when a check interval has elapsed."""

        if time_scale <= 0:
            return None
        if time - self.last_check < self.config.check_interval / time_scale:
            return None
        self.last_check = time
        probability = self.config.base_probability * math.sqrt(time_scale)
        if self.rng.next() < probability:
            return self.spawn(star, time)
        return None

    def spawn(
        self,
        star: Star,
        time: float,
        kind: Optional[InterstellarKind] = None,
    ) -> Optional[InterstellarObject]:
        """Spawn a visitor now, drawing its kind unless one is given.

        Returns ``None`` without consuming the stream when both populations
        are at their caps, and after the kind draw when the ordinary cap
        blocks the chosen kind.
        """

        if self._ordinary_full() and self._passing_full():
            return None
        if kind is None:
            kind = select_interstellar_kind(self.rng)
        if kind is InterstellarKind.PASSING_SYSTEM and self._passing_full():
            kind = InterstellarKind.COMET
        if kind is not InterstellarKind.PASSING_SYSTEM and self._ordinary_full():
            return None

        obj = generate_interstellar(self.rng, kind, star, self._next_id, time)
        self._next_id += 1
        if obj.is_passing_system:
            self.passing_systems.append(obj)
        else:
            self.active.append(obj)
        self._emit(EventKind.SPAWN, obj, time)
        if self._log is not None:
            self._log.info(
                "Spawned %s #%d %s (e=%.3f, q=%.1f AU)",
                kind.value,
                obj.id,
                obj.name,
                obj.orbit.eccentricity,
                obj.orbit.perihelion,
            )
        return obj

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def despawn_distance(self, obj: InterstellarObject) -> float:
        if obj.is_passing_system:
            return self.config.despawn_distance * self.config.passing_despawn_factor
        return self.config.despawn_distance

    def _crossed_perihelion(self, obj: InterstellarObject, true_anomaly: float) -> bool:
        if abs(true_anomaly) < self.config.perihelion_window:
            return True
        previous = obj.last_true_anomaly
        return previous is not None and previous < 0.0 <= true_anomaly

    def _advance(self, obj: InterstellarObject, time: float) -> bool:
        """Update one visitor; ``False`` once it has left."""

        sample = interstellar_position(obj, time)
        if sample.distance_au > self.despawn_distance(obj):
            if not obj.despawned:
                obj.despawned = True
                self._emit(EventKind.DESPAWN, obj, time)
                if self._log is not None:
                    self._log.info("%s departed at %.1f AU", obj.name, sample.distance_au)
            return False
        if not obj.reached_perihelion and self._crossed_perihelion(obj, sample.true_anomaly):
            obj.reached_perihelion = True
            self._emit(EventKind.PERIHELION, obj, time)
            if self._log is not None:
                self._log.info("%s at perihelion, %.2f AU", obj.name, sample.distance_au)
        obj.last_true_anomaly = sample.true_anomaly
        return True

    def advance(self, time: float) -> None:
        self.active = [obj for obj in self.active if self._advance(obj, time)]
        self.passing_systems = [obj for obj in self.passing_systems if self._advance(obj, time)]

    def update(self, star: Star, time: float, time_scale: float = 1.0) -> Optional[InterstellarObject]:
        spawned = self.check(star, time, time_scale)
        self.advance(time)
        return spawned

    def _emit(self, kind: EventKind, obj: InterstellarObject, time: float) -> None:
        self.notifications.add(kind, obj, time)
        self.history.record(kind, obj, time)


__all__ = [
    "EventEngine",
    "EventKind",
    "EventLog",
    "EventRecord",
    "Notification",
    "NotificationLog",
    "NotificationPriority",
    "notification_priority",
    "notification_text",
]
