from orrery.engine.loop import FixedTimestepLoop


class FakeClock:
    def __init__(self, step: float) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


def test_run_steps_is_unpaced():
    ticks = []
    renders = []
    loop = FixedTimestepLoop(ticks.append, renders.append, fixed_hz=50)
    loop.run_steps(3)
    assert loop.updates == 3
    assert ticks == [0.02, 0.02, 0.02]
    assert renders == [0.0, 0.0, 0.0]


def test_run_stops_after_max_updates():
    ticks = []
    loop = FixedTimestepLoop(ticks.append, fixed_hz=60, max_updates=10, clock=FakeClock(0.1))
    loop.run()
    assert loop.updates == 10
    assert len(ticks) == 10
    assert not loop.running


def test_stop_from_update():
    holder = {}

    def update(dt: float) -> None:
        holder["loop"].stop()

    loop = FixedTimestepLoop(update, clock=FakeClock(0.05))
    holder["loop"] = loop
    loop.run()
    assert loop.updates == 1


def test_long_frames_are_clamped():
    ticks = []
    loop = FixedTimestepLoop(ticks.append, fixed_hz=10, max_frame_time=0.25, max_updates=2, clock=FakeClock(10.0))
    loop.run()
    assert loop.updates == 2
