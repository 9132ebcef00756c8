from dataclasses import dataclass
from datetime import time

import pytest

from app.core.errors import OutOfHours, SlotCollision
from app.services.availability import check_availability
from app.services.collisions import check_collisions, find_collisions, find_out_of_hours
from app.services.scheduling_config import SchedulingConfig


@dataclass
class FakeInterview:
    id: int
    interview_time: time


@pytest.fixture
def config():
    return SchedulingConfig(duration_hours=1, duration_minutes=30)


def test_availability_inside_window():
    check_availability(time(9, 0), time(10, 30), time(9, 0), time(17, 0))


def test_availability_outside_window_carries_window():
    with pytest.raises(OutOfHours) as exc_info:
        check_availability(time(16, 0), time(17, 30), time(9, 0), time(17, 0))

    err = exc_info.value
    assert err.available_start == time(9, 0)
    assert err.available_end == time(17, 0)
    assert err.extra == {"available_start": "09:00", "available_end": "17:00"}
    assert "09:00" in err.detail and "17:00" in err.detail


def test_availability_rejects_interview_wrapping_midnight():
    with pytest.raises(OutOfHours):
        check_availability(time(23, 0), time(0, 30), time(0, 0), time(23, 59))


def test_find_collisions_reports_overlapping_interviews(config):
    existing = [FakeInterview(1, time(10, 0)), FakeInterview(2, time(14, 0))]

    found = find_collisions(time(11, 0), time(12, 30), existing, config)

    assert [i.id for i in found] == [1]


def test_back_to_back_interviews_do_not_collide(config):
    existing = [FakeInterview(1, time(10, 0))]

    assert find_collisions(time(11, 30), time(13, 0), existing, config) == []
    assert find_collisions(time(8, 30), time(10, 0), existing, config) == []


def test_excluded_interview_is_ignored(config):
    existing = [FakeInterview(1, time(10, 0))]

    assert find_collisions(time(10, 0), time(11, 30), existing, config, exclude_id=1) == []


def test_check_collisions_lists_all_conflicts(config):
    existing = [FakeInterview(5, time(10, 0)), FakeInterview(3, time(11, 0)), FakeInterview(7, time(15, 0))]

    with pytest.raises(SlotCollision) as exc_info:
        check_collisions(time(10, 30), time(12, 0), existing, config)

    assert exc_info.value.conflicting_ids == [3, 5]


def test_find_out_of_hours(config):
    interviews = [
        FakeInterview(1, time(9, 0)),
        FakeInterview(2, time(12, 0)),
        FakeInterview(3, time(15, 30)),
        FakeInterview(4, time(16, 0)),
    ]

    out = find_out_of_hours(interviews, time(10, 0), time(17, 0), config)

    assert [i.id for i in out] == [1, 4]


def test_config_rejects_zero_duration():
    with pytest.raises(ValueError):
        SchedulingConfig(duration_hours=0, duration_minutes=0)


def test_config_interview_end():
    assert SchedulingConfig(duration_hours=0, duration_minutes=45).interview_end(time(9, 30)) == time(10, 15)
