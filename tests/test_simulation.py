import pytest

from dopareserve.core.config import SimulationConfig
from dopareserve.sim.simulation import ReserveSimulation, SimulationState, SimulationStopped


class TestCreate:
    def test_seeded_state(self, state):
        assert state.reserve == 50.0
        assert state.active == set()
        assert len(state.buffer) == 2880
        assert state.running

    def test_custom_capacity(self):
        s = SimulationState.create(SimulationConfig(capacity=5))
        assert len(s.buffer) == 5
        assert s.buffer.next_index == 5

    def test_initial_reserve_is_clamped(self):
        s = SimulationState.create(SimulationConfig(initial_reserve=140.0))
        assert s.reserve == 100.0
        assert s.buffer.latest().reserve_percent == 100.0


class TestTick:
    def test_idle_tick(self, state, sim):
        sample = sim.tick()

        assert sample.consumption == pytest.approx(0.05)
        assert state.reserve == pytest.approx(50.05)
        assert sample.reserve_percent == pytest.approx(50.05)
        assert sample.activities == ()

    def test_first_tick_continues_sequence(self, state, sim):
        sample = sim.tick()
        assert sample.sequence_index == 2880
        assert state.buffer.oldest().sequence_index == 1
        assert len(state.buffer) == 2880

    def test_amphetamine_drains(self, state, sim):
        state.active.add("amphetamine")
        sample = sim.tick()

        assert sample.consumption == pytest.approx(0.55)
        assert state.reserve == pytest.approx(49.55)

    def test_amphetamine_never_below_zero(self, state, sim):
        state.active.add("amphetamine")
        for _ in range(500):
            sim.tick()

        assert state.reserve == 0.0
        assert min(s.reserve_percent for s in state.buffer) == 0.0

    def test_refill_stops_at_full(self, state, sim):
        state.active.add("sleep")
        state.reserve = 99.95
        for _ in range(10):
            sim.tick()
        assert state.reserve == 100.0

    @pytest.mark.parametrize("start", [-20.0, 0.0, 0.3, 50.0, 99.99, 100.0, 180.0])
    @pytest.mark.parametrize("active", [set(), {"sleep"}, {"amphetamine"}, {"work", "play", "smoke"}])
    def test_reserve_stays_in_range(self, state, sim, start, active):
        state.reserve = start
        state.active.update(active)
        sim.tick()
        assert 0.0 <= state.reserve <= 100.0

    def test_snapshot_in_catalog_order(self, state, sim):
        state.active.update({"smoke", "sleep"})
        sample = sim.tick()
        assert sample.activities == ("sleep", "smoke")

    def test_snapshot_not_affected_by_later_changes(self, state, sim):
        state.active.add("work")
        sample = sim.tick()
        state.active.clear()
        assert sample.activities == ("work",)

    def test_sequence_strictly_increasing(self, state, sim):
        for _ in range(100):
            sim.tick()
        indices = [s.sequence_index for s in state.buffer]
        assert all(b > a for a, b in zip(indices, indices[1:]))
        assert len(state.buffer) == 2880

    def test_net_rate(self, state):
        assert state.net_rate() == pytest.approx(0.05)
        state.active.add("amphetamine")
        assert state.net_rate() == pytest.approx(-0.45)


class TestDispose:
    def test_tick_after_dispose_raises(self, state, sim):
        state.dispose()
        with pytest.raises(SimulationStopped):
            sim.tick()

    def test_dispose_clears_active(self, state):
        state.active.add("work")
        state.dispose()
        assert state.active == set()
        assert not state.running

    def test_two_simulations_are_independent(self):
        a = SimulationState.create()
        b = SimulationState.create()
        a.active.add("amphetamine")
        ReserveSimulation(a).tick()
        ReserveSimulation(b).tick()
        assert a.reserve < b.reserve
