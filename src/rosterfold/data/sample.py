"""The band roster used as the running example."""

from rosterfold.core.data_models import Roster

__all__ = ["SAMPLE_ROSTER"]

SAMPLE_ROSTER = Roster.from_mapping(
    {
        "joy_division": ["ian", "bernard", "peter", "stephen"],
        "the_smiths": ["johnny", "andy", "morrissey", "mike"],
        "the_cramps": ["lux", "ivy", "nick"],
        "blondie": ["debbie", "chris", "clem", "jimmy", "nigel"],
        "talking_heads": ["david", "tina", "chris", "jerry"],
    }
)
