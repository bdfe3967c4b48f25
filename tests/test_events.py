"""Interstellar event engine: caps, lifecycle and notifications."""
from __future__ import annotations

import pytest

from orrery.catalog.interstellar import EventConfig, InterstellarKind
from orrery.core.rng import SeededRandom
from orrery.engine.logger import LoggerConfig, OrreryLogger
from orrery.generation.interstellar import generate_interstellar
from orrery.generation.system import generate_system
from orrery.world.events import (
    EventEngine,
    EventKind,
    NotificationLog,
    NotificationPriority,
)
from orrery.world.positions import interstellar_position


def _quiet_logger() -> OrreryLogger:
    return OrreryLogger(LoggerConfig.quiet(), configure_root=False)


def _star():
    return generate_system("sol").star


def _departure_time(engine: EventEngine, obj) -> float:
    limit = engine.despawn_distance(obj)
    time = obj.spawn_time + 1000.0
    while interstellar_position(obj, time).distance_au <= limit:
        time *= 2.0
    return time


def test_forced_spawn_notifies() -> None:
    engine = EventEngine(SeededRandom(1), logger=_quiet_logger())
    obj = engine.spawn(_star(), 10.0, InterstellarKind.ROGUE_BLACK_HOLE)
    assert obj is not None
    assert obj.id == 1
    assert obj.spawn_time == 10.0
    assert engine.active == [obj]
    notification = list(engine.notifications)[0]
    assert notification.message == f"Rogue Black Hole detected: {obj.name}"
    assert notification.priority is NotificationPriority.HIGH
    assert [record.kind for record in engine.history] == [EventKind.SPAWN]


def test_ids_are_sequential() -> None:
    engine = EventEngine(SeededRandom(2))
    star = _star()
    ids = [engine.spawn(star, 0.0, InterstellarKind.COMET).id for _ in range(3)]
    assert ids == [1, 2, 3]
    assert list(engine.notifications)[0].priority is NotificationPriority.NORMAL


def test_passing_system_cap_demotes_to_comet() -> None:
    engine = EventEngine(SeededRandom(3))
    star = _star()
    first = engine.spawn(star, 0.0, InterstellarKind.PASSING_SYSTEM)
    second = engine.spawn(star, 0.0, InterstellarKind.PASSING_SYSTEM)
    assert first.kind is InterstellarKind.PASSING_SYSTEM
    assert second.kind is InterstellarKind.COMET
    assert engine.passing_systems == [first]
    assert engine.active == [second]


def test_saturated_caps_skip_without_drawing() -> None:
    config = EventConfig(max_active_objects=1, max_passing_systems=1)
    engine = EventEngine(SeededRandom(4), config)
    star = _star()
    engine.spawn(star, 0.0, InterstellarKind.COMET)
    engine.spawn(star, 0.0, InterstellarKind.PASSING_SYSTEM)
    state = engine.rng.state
    assert engine.spawn(star, 0.0) is None
    assert engine.rng.state == state


def test_full_ordinary_cap_blocks_ordinary_kinds() -> None:
    config = EventConfig(max_active_objects=1, max_passing_systems=1)
    engine = EventEngine(SeededRandom(5), config)
    star = _star()
    engine.spawn(star, 0.0, InterstellarKind.COMET)
    assert engine.spawn(star, 0.0, InterstellarKind.ROGUE_PLANET) is None
    assert engine.spawn(star, 0.0, InterstellarKind.PASSING_SYSTEM) is not None


def test_checks_wait_for_interval() -> None:
    config = EventConfig(base_probability=1.0)
    engine = EventEngine(SeededRandom(6), config)
    star = _star()
    state = engine.rng.state
    assert engine.update(star, 499.0) is None
    assert engine.rng.state == state
    assert engine.update(star, 500.0) is not None
    assert engine.last_check == 500.0
    assert engine.update(star, 700.0) is None


def test_time_scale_shortens_interval() -> None:
    config = EventConfig(base_probability=1.0)
    engine = EventEngine(SeededRandom(6), config)
    assert engine.update(_star(), 100.0, time_scale=5.0) is not None


def test_stopped_or_reversed_clock_never_spawns() -> None:
    config = EventConfig(base_probability=1.0)
    engine = EventEngine(SeededRandom(6), config)
    star = _star()
    state = engine.rng.state
    assert engine.update(star, 10.0, time_scale=0.0) is None
    assert engine.update(star, 900.0, time_scale=-2.0) is None
    assert engine.rng.state == state
    assert engine.last_check == 0.0


def test_zero_probability_never_spawns() -> None:
    config = EventConfig(base_probability=0.0, check_interval=1.0)
    engine = EventEngine(SeededRandom(7), config)
    star = _star()
    for time in range(1, 200):
        engine.update(star, float(time))
    assert engine.objects() == []


def test_perihelion_is_flagged_once() -> None:
    engine = EventEngine(SeededRandom(8))
    star = _star()
    obj = engine.spawn(star, 0.0, InterstellarKind.COMET)
    engine.advance(0.0)
    assert obj.last_true_anomaly is not None and obj.last_true_anomaly < 0.0
    assert not obj.reached_perihelion

    perihelion_time = -obj.orbit.mean_anomaly / obj.orbit.mean_motion
    engine.advance(perihelion_time + 1.0)
    assert obj.reached_perihelion
    engine.advance(perihelion_time + 2.0)
    kinds = [record.kind for record in engine.history]
    assert kinds.count(EventKind.PERIHELION) == 1
    messages = [item.message for item in engine.notifications]
    assert f"{obj.name} at closest approach" in messages


def test_perihelion_crossing_between_ticks() -> None:
    engine = EventEngine(SeededRandom(9))
    obj = engine.spawn(_star(), 0.0, InterstellarKind.ROGUE_PLANET)
    engine.advance(0.0)
    perihelion_time = -obj.orbit.mean_anomaly / obj.orbit.mean_motion
    # Jump well past the window in a single tick.
    engine.advance(perihelion_time * 1.5)
    assert obj.reached_perihelion


def test_departure_removes_and_notifies() -> None:
    engine = EventEngine(SeededRandom(10))
    star = _star()
    obj = engine.spawn(star, 0.0, InterstellarKind.COMET)
    leave = _departure_time(engine, obj)
    engine.advance(leave)
    assert obj.despawned
    assert engine.active == []
    last = list(engine.notifications)[-1]
    assert last.message == f"{obj.name} has left the system"
    assert last.priority is NotificationPriority.LOW
    assert list(engine.history)[-1].kind is EventKind.DESPAWN


def test_passing_systems_leave_later() -> None:
    engine = EventEngine(SeededRandom(11))
    obj = engine.spawn(_star(), 0.0, InterstellarKind.PASSING_SYSTEM)
    assert engine.despawn_distance(obj) == pytest.approx(300.0)
    engine.advance(_departure_time(engine, obj))
    assert engine.passing_systems == []


def test_clear_resets_everything() -> None:
    engine = EventEngine(SeededRandom(12))
    star = _star()
    engine.spawn(star, 0.0, InterstellarKind.COMET)
    engine.last_check = 900.0
    engine.clear()
    assert engine.objects() == []
    assert len(engine.notifications) == 0
    assert len(engine.history) == 0
    assert engine.last_check == 0.0
    assert engine.spawn(star, 0.0, InterstellarKind.COMET).id == 1


def test_notification_log_is_bounded() -> None:
    log = NotificationLog(capacity=3)
    obj = generate_interstellar(SeededRandom(1), InterstellarKind.COMET, _star(), 1)
    for _ in range(5):
        log.add(EventKind.SPAWN, obj, 0.0)
    assert len(log) == 3
    assert [item.id for item in log] == [3, 4, 5]


def test_read_flags() -> None:
    log = NotificationLog()
    obj = generate_interstellar(SeededRandom(1), InterstellarKind.COMET, _star(), 1)
    first = log.add(EventKind.SPAWN, obj, 0.0)
    log.add(EventKind.PERIHELION, obj, 5.0)
    assert log.mark_read(first.id)
    assert not log.mark_read(999)
    assert len(log.unread()) == 1
    log.mark_all_read()
    assert log.unread() == []
