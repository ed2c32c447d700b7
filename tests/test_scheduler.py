from dopareserve.sim.scheduler import TickScheduler


class TestTickScheduler:
    def test_fires_when_due(self):
        fired = []
        s = TickScheduler(speed=60)
        s(1000, lambda: fired.append("a"))
        assert s.advance(59) == 0
        assert s.advance(1) == 1
        assert fired == ["a"]
        assert s.pending == 0

    def test_fires_in_due_order(self):
        fired = []
        s = TickScheduler(speed=1)
        s(3000, lambda: fired.append("late"))
        s(1000, lambda: fired.append("early"))
        s.advance(5)
        assert fired == ["early", "late"]

    def test_minimum_one_tick(self):
        fired = []
        s = TickScheduler(speed=1)
        s(0, lambda: fired.append("x"))
        assert s.advance() == 1
