import pandas as pd
import pytest
from pydantic import ValidationError
from rosterfold.core.data_models import Roster, RosterEntry
from rosterfold.core.errors import InvalidInputError, RosterError


def test_initialization(roster, band_mapping):
    assert len(roster) == 5
    assert roster.bands == list(band_mapping.keys())
    assert roster["the_cramps"] == ("lux", "ivy", "nick")
    assert "blondie" in roster
    assert "ramones" not in roster


def test_member_order_preserved(roster, band_mapping):
    for band, members in band_mapping.items():
        assert list(roster[band]) == members


def test_missing_band_raises_key_error(roster):
    with pytest.raises(KeyError):
        roster["ramones"]


def test_empty_roster_is_valid():
    roster = Roster.from_mapping({})
    assert len(roster) == 0
    assert roster.bands == []
    assert list(roster.entries()) == []


def test_empty_member_list_is_valid():
    roster = Roster.from_mapping({"silent_band": []})
    assert roster["silent_band"] == ()


def test_accepts_any_iterable_of_members():
    roster = Roster.from_mapping(
        {"a": ("x", "y"), "b": (name for name in ["z"]), "c": {"k": "w"}.values()}
    )
    assert roster.to_dict() == {"a": ["x", "y"], "b": ["z"], "c": ["w"]}


def test_from_mapping_returns_existing_roster(roster):
    assert Roster.from_mapping(roster) is roster


@pytest.mark.parametrize(
    "bad_input",
    [
        [("the_cramps", ["lux"])],
        "the_cramps",
        None,
        42,
    ],
)
def test_non_mapping_input_rejected(bad_input):
    with pytest.raises(InvalidInputError):
        Roster.from_mapping(bad_input)


@pytest.mark.parametrize(
    "bad_mapping",
    [
        {1: ["lux"]},  # non-string key
        {"": ["lux"]},  # empty band name
        {"the_cramps": "lux"},  # bare string instead of a list
        {"the_cramps": b"lux"},
        {"the_cramps": 3},  # not iterable
        {"the_cramps": ["lux", 3]},  # non-string member
        {"the_cramps": [None]},
        {"the_cramps": {"lux", "ivy", "nick"}},  # unordered set
        {"the_cramps": {"lux": 1, "ivy": 2}},  # mapping would keep only keys
        {"the_cramps": frozenset({"lux"})},
    ],
)
def test_malformed_mapping_rejected(bad_mapping):
    with pytest.raises(InvalidInputError) as exc_info:
        Roster.from_mapping(bad_mapping)
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_invalid_input_error_hierarchy():
    with pytest.raises(ValueError):
        Roster.from_mapping({"the_cramps": "lux"})
    with pytest.raises(RosterError):
        Roster.from_mapping(None)


def test_roster_is_frozen(roster):
    with pytest.raises(ValidationError):
        roster.band_map = {}


def test_band_map_is_read_only(roster):
    df = roster.df
    with pytest.raises(TypeError):
        roster.band_map["ramones"] = ("joey",)
    with pytest.raises(TypeError):
        del roster.band_map["blondie"]

    assert "ramones" not in roster
    assert len(roster) == 5
    assert len(roster.df) == len(df) == 20


def test_default_band_map_is_read_only():
    roster = Roster()
    assert len(roster) == 0
    with pytest.raises(TypeError):
        roster.band_map["ramones"] = ("joey",)


def test_to_dict_is_a_copy(roster, band_mapping):
    copy = roster.to_dict()
    assert copy == band_mapping
    copy["the_cramps"].append("poison_ivy")
    copy["ramones"] = ["joey"]
    assert roster["the_cramps"] == ("lux", "ivy", "nick")
    assert "ramones" not in roster


def test_entries_are_named_pairs(roster):
    entries = list(roster.entries())
    assert len(entries) == 5
    first = entries[0]
    assert isinstance(first, RosterEntry)
    assert first.key == "joy_division"
    assert first.value == ("ian", "bernard", "peter", "stephen")

    key, value = first
    assert (key, value) == (first.key, first.value)


def test_equality_respects_band_order():
    a = Roster.from_mapping({"x": ["1"], "y": ["2"]})
    b = Roster.from_mapping({"x": ["1"], "y": ["2"]})
    reordered = Roster.from_mapping({"y": ["2"], "x": ["1"]})

    assert a == b
    assert a != reordered
    assert a != {"x": ["1"], "y": ["2"]}


def test_dataframe_access(roster):
    df = roster.df
    assert isinstance(df.index, pd.MultiIndex)
    assert list(df.index.names) == ["band", "position"]
    assert list(df.columns) == ["member"]
    assert len(df) == 20  # 4 + 4 + 3 + 5 + 4 members
    assert df.loc[("the_smiths", 1), "member"] == "andy"
    assert list(df.loc["the_cramps", "member"]) == ["lux", "ivy", "nick"]

    # cached
    assert roster.df is df


def test_dataframe_empty_roster():
    df = Roster.from_mapping({}).df
    assert df.empty
    assert list(df.index.names) == ["band", "position"]
    assert list(df.columns) == ["member"]


def test_repr(roster):
    assert repr(roster) == "Roster(bands=5, members=20)"


def test_invalid_input_is_logged(attach_caplog):
    with pytest.raises(InvalidInputError):
        Roster.from_mapping(["not", "a", "mapping"])
    assert any(
        record.levelname == "ERROR" and "expected a mapping" in record.getMessage()
        for record in attach_caplog.records
    )
