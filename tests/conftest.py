import pytest

from models import Entertainment, HotelProperty
from reference_data import DEFAULT_TABLES


@pytest.fixture
def tables():
    return DEFAULT_TABLES


@pytest.fixture
def plain_hotel():
    """Non-major city, no resort amenities"""
    return HotelProperty(
        id="TSTPLAIN", brand_id="HP", name="Hampton Test", region="North America",
        address="1 Main St", city="Omaha", country="USA", base_price=100.0,
        amenities=("WiFi", "Fitness Center"), state="NE",
    )


@pytest.fixture
def resort_hotel():
    """Major city with a pool"""
    return HotelProperty(
        id="TSTRESORT", brand_id="HI", name="Hilton Test Resort", region="North America",
        address="2 Ocean Dr", city="Miami", country="USA", base_price=100.0,
        amenities=("WiFi", "Pool"), state="FL",
    )


@pytest.fixture
def show():
    return Entertainment(
        id="tst-show", name="Test Show", category="Show", base_price=189.0,
        location="New York", points_eligible=True, max_points_discount=0.5,
    )


@pytest.fixture
def ballgame():
    return Entertainment(
        id="tst-game", name="Test Game", category="Sports", base_price=75.0,
        location="Chicago", points_eligible=False, max_points_discount=0.5,
    )
