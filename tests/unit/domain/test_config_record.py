"""Unit tests for `kite.domain.config_record`."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kite.domain.config_record import MASK, ConfigRecord, mask_secret


def test_defaults_are_unset():
    """A fresh record has every field empty."""
    record = ConfigRecord()
    assert (record.api_key, record.access_token, record.team_id, record.team_name) == (
        "",
        "",
        "",
        "",
    )
    assert not record.has_credentials
    assert not record.has_team


@pytest.mark.parametrize(
    ("api_key", "access_token", "expected"),
    [("k", "t", True), ("k", "", False), ("", "t", False), ("", "", False)],
)
def test_has_credentials_requires_both_secrets(api_key, access_token, expected):
    """Credentials count as present only when both secrets are set."""
    assert ConfigRecord(api_key=api_key, access_token=access_token).has_credentials is expected


def test_set_team_sets_both_fields():
    """set_team records id and name together."""
    record = ConfigRecord()
    record.set_team("PTEAM1", "SRE Platform")
    assert record.has_team
    assert (record.team_id, record.team_name) == ("PTEAM1", "SRE Platform")


@pytest.mark.parametrize(("team_id", "team_name"), [("PTEAM1", ""), ("", "SRE"), ("", "")])
def test_set_team_rejects_half_pairs(team_id, team_name):
    """A team id without a name (or vice versa) is refused and nothing changes."""
    record = ConfigRecord(team_id="OLD", team_name="Old team")
    with pytest.raises(ValueError, match="set together"):
        record.set_team(team_id, team_name)
    assert (record.team_id, record.team_name) == ("OLD", "Old team")


def test_clear_team_empties_both_fields():
    """clear_team forgets the pair."""
    record = ConfigRecord(team_id="PTEAM1", team_name="SRE")
    record.clear_team()
    assert not record.has_team
    assert (record.team_id, record.team_name) == ("", "")


@given(api_key=st.text(min_size=4), access_token=st.text(min_size=4))
def test_repr_never_shows_secrets(api_key, access_token):
    """repr() masks both secrets regardless of their value."""
    text = repr(ConfigRecord(api_key=api_key, access_token=access_token, team_id="T1"))
    assert f"api_key={MASK!r}" in text
    assert f"access_token={MASK!r}" in text
    assert "team_id='T1'" in text


@pytest.mark.parametrize(("value", "expected"), [("", ""), ("s3cr3t", MASK)])
def test_mask_secret(value, expected):
    """Empty secrets stay recognisably empty; anything else is masked."""
    assert mask_secret(value) == expected
