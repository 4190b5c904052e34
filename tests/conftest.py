import pytest

from miqaat import create_app
from miqaat.config import CalendarConfig
from miqaat.models.daily_dua import DailyDua
from miqaat.models.miqaat import Miqaat
from miqaat.storage import daily_dua_repository, miqaat_repository


@pytest.fixture
def sample_miqaats():
    """A small set of miqaats covering day, night and incomplete slots."""
    return [
        Miqaat(
            id=1,
            name="Ashura",
            date=10,
            month=1,
            date_night=10,
            month_night=1,
            type="SHAHADAT",
            important=True,
        ),
        Miqaat(id=2, name="Urs Mubarak", date=5, month=3, type="urs", location="Mumbai"),
        Miqaat(
            id=3,
            name="Pehli Raat",
            date_night=1,
            month_night=9,
            type="PEHLI_RAAT",
            phase="NIGHT",
        ),
        Miqaat(id=4, name="Undated Majlis"),
    ]


@pytest.fixture
def sample_daily_duas():
    """Daily dua on 5 Rabi al-Awwal (zero-based month 2)."""
    return [DailyDua(id=1, library_id=7, date=5, month=2, note="Dua-e-Kamil")]


@pytest.fixture
def config(tmp_path):
    """Configuration pointing at a temporary data directory."""
    return CalendarConfig(data_dir=tmp_path / "data", log_dir=tmp_path / "logs")


@pytest.fixture
def populated_config(config, sample_miqaats, sample_daily_duas):
    """Configuration whose store already holds the sample records."""
    miqaat_repository(config).replace_all(sample_miqaats)
    daily_dua_repository(config).replace_all(sample_daily_duas)
    return config


@pytest.fixture
def app(populated_config):
    """Create and configure a Flask app for testing."""
    app = create_app(populated_config)
    return app
