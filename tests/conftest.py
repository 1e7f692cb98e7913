import pytest

from core.database import MemoryBlobStore
from core.models import AppState, DailyRecord
from core.state import TrackerStore

TODAY = "2024-01-10"

FULL = DailyRecord(pushups=True, situps=True, squats=True, running=True)
PARTIAL = DailyRecord(pushups=True)
ZERO = DailyRecord(pushups=False)

@pytest.fixture
def today():
    return TODAY

@pytest.fixture
def clock():
    return lambda: TODAY

@pytest.fixture
def memory_store():
    return MemoryBlobStore()

@pytest.fixture
def sample_state():
    return AppState(
        start_date="2024-01-01",
        daily_data={
            "2024-01-01": FULL,
            "2024-01-02": FULL,
            "2024-01-03": DailyRecord(pushups=True, situps=False),
        },
        weight_data={"2024-01-01": 72.5, "2024-01-05": 71.0},
        dark_mode=True,
    )

@pytest.fixture
def tracker(sample_state, clock):
    return TrackerStore(sample_state, clock=clock)
