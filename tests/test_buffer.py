import dataclasses

import pytest

from dopareserve.core.buffer import RollingBuffer, clock_label
from dopareserve.core.config import MAX_DATA_LENGTH


class TestClockLabel:
    @pytest.mark.parametrize("index, label", [
        (0, "00:00"),
        (61, "01:01"),
        (719, "11:59"),
        (1440, "00:00"),
        (2879, "23:59"),
    ])
    def test_wraps_every_day(self, index, label):
        assert clock_label(index) == label


class TestRollingBuffer:
    def test_seeded_fills_to_capacity(self):
        buf = RollingBuffer.seeded(MAX_DATA_LENGTH, consumption=0.05, reserve_percent=50.0)
        assert len(buf) == 2880
        assert buf.oldest().sequence_index == 0
        assert buf.latest().sequence_index == 2879
        assert buf.next_index == 2880
        assert all(s.reserve_percent == 50.0 and s.activities == () for s in buf)

    def test_append_at_capacity_evicts_oldest(self):
        buf = RollingBuffer.seeded(MAX_DATA_LENGTH, consumption=0.05, reserve_percent=50.0)
        k = buf.oldest().sequence_index

        newest = buf.append(0.55, 49.55, ("amphetamine",))

        assert len(buf) == 2880
        assert buf.oldest().sequence_index == k + 1
        assert newest.sequence_index == k + 2880
        assert buf.latest() is newest

    def test_indices_keep_increasing(self):
        buf = RollingBuffer(3)
        for i in range(10):
            buf.append(0.05, float(i), ())
        indices = [s.sequence_index for s in buf]
        assert indices == [7, 8, 9]
        assert len(buf) == 3

    def test_growth_before_capacity(self):
        buf = RollingBuffer(5)
        assert len(buf) == 0
        assert buf.latest() is None
        buf.append(0.05, 50.0, ())
        buf.append(0.05, 50.0, ())
        assert len(buf) == 2

    def test_sample_is_frozen(self):
        buf = RollingBuffer(2)
        s = buf.append(0.05, 50.0, ("work",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.reserve_percent = 10.0

    def test_sample_has_clock_label(self):
        buf = RollingBuffer(2)
        for _ in range(62):
            s = buf.append(0.05, 50.0, ())
        assert s.clock_label == "01:01"

    def test_snapshot_is_a_copy(self):
        buf = RollingBuffer(2)
        buf.append(0.05, 50.0, ())
        snap = buf.snapshot()
        buf.append(0.05, 50.0, ())
        assert len(snap) == 1

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            RollingBuffer(0)
