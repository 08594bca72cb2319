import pytest
from rosterfold.core.data_models import Roster


@pytest.fixture
def band_mapping():
    return {
        "joy_division": ["ian", "bernard", "peter", "stephen"],
        "the_smiths": ["johnny", "andy", "morrissey", "mike"],
        "the_cramps": ["lux", "ivy", "nick"],
        "blondie": ["debbie", "chris", "clem", "jimmy", "nigel"],
        "talking_heads": ["david", "tina", "chris", "jerry"],
    }


@pytest.fixture
def roster(band_mapping):
    return Roster.from_mapping(band_mapping)


@pytest.fixture
def attach_caplog(caplog):
    """Route the project logger into caplog (it does not propagate to root)."""
    from rosterfold.logger.logger import logger

    logger.addHandler(caplog.handler)
    caplog.set_level("DEBUG", logger="rosterfold")
    yield caplog
    logger.removeHandler(caplog.handler)
