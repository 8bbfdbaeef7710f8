"""
Tests for channel parsing, normalization, expansion and matching.
"""

import pytest
from pydantic import ValidationError

from systems.errors import (
    EmptyChannelError,
    InvalidBranchError,
    InvalidChannelError,
    InvalidRiskError,
    InvalidTrackError,
    TooManyComponentsError,
)
from systems.engine.parser import full, must_parse, parse, parse_verbatim
from systems.models.channel import Channel, EMPTY_CHANNEL, Match, Risk


class TestRisk:
    def test_parse_known(self):
        assert Risk.parse("stable") == Risk.STABLE
        assert Risk.parse("edge") == Risk.EDGE

    @pytest.mark.parametrize("value", ["", "Stable", "cand", "latest"])
    def test_parse_unknown(self, value):
        with pytest.raises(InvalidRiskError):
            Risk.parse(value)

    def test_parse_error_names_channel(self):
        with pytest.raises(InvalidRiskError, match="invalid risk in channel name: 1.0/cand") as exc:
            Risk.parse("cand", channel="1.0/cand")
        assert exc.value.channel == "1.0/cand"

    def test_levels(self):
        assert Risk.STABLE.level < Risk.CANDIDATE.level < Risk.BETA.level < Risk.EDGE.level
        assert Risk.UNKNOWN.level == -1

    def test_is_known(self):
        assert Risk.is_known("beta")
        assert not Risk.is_known("")
        assert not Risk.is_known("1.0")


class TestParse:
    @pytest.mark.parametrize("value,expected", [
        ("stable", Channel(name="stable", track="", risk=Risk.STABLE)),
        ("latest/stable", Channel(name="stable", track="", risk=Risk.STABLE)),
        ("1.0/edge", Channel(name="1.0/edge", track="1.0", risk=Risk.EDGE)),
        ("1.0", Channel(name="1.0/stable", track="1.0", risk=Risk.STABLE)),
        ("1.0/beta/foo", Channel(name="1.0/beta/foo", track="1.0", risk=Risk.BETA, branch="foo")),
        ("candidate/foo", Channel(name="candidate/foo", track="", risk=Risk.CANDIDATE, branch="foo")),
    ])
    def test_parse(self, value, expected):
        assert parse(value) == expected

    def test_default_track_equivalence(self):
        assert parse("stable") == parse("latest/stable")

    @pytest.mark.parametrize("value", [
        "stable", "latest", "edge", "1.0", "1.0/edge", "latest/beta/fix", "candidate/foo",
    ])
    def test_clean_is_idempotent(self, value):
        ch = parse(value)
        assert ch.clean() == ch
        assert ch.clean().clean() == ch.clean()
        assert not ch.name.startswith("/")
        assert not ch.name.endswith("/")

    def test_must_parse(self):
        assert must_parse("20.04/stable").track == "20.04"
        with pytest.raises(EmptyChannelError):
            must_parse("")


class TestParseVerbatim:
    def test_track_only(self):
        ch = parse_verbatim("sometrack")
        assert ch == Channel(track="sometrack")
        assert ch.verbatim_track_only()
        assert not ch.verbatim_risk_only()
        assert ch.clean() == parse("sometrack")

    def test_latest_is_kept(self):
        ch = parse_verbatim("latest")
        assert ch == Channel(track="latest")
        assert ch.verbatim_track_only()
        assert ch.clean() == parse("latest")

    def test_risk_only(self):
        ch = parse_verbatim("edge")
        assert ch == Channel(risk=Risk.EDGE)
        assert not ch.verbatim_track_only()
        assert ch.verbatim_risk_only()
        assert ch.clean() == parse("edge")

    def test_track_and_risk(self):
        ch = parse_verbatim("latest/stable")
        assert ch == Channel(track="latest", risk=Risk.STABLE)
        assert not ch.verbatim_track_only()
        assert not ch.verbatim_risk_only()

    def test_all_fields(self):
        ch = parse_verbatim("latest/stable/foo")
        assert ch == Channel(track="latest", risk=Risk.STABLE, branch="foo")
        assert ch.name == ""
        assert ch.clean() == parse("latest/stable/foo")


class TestParseErrors:
    @pytest.mark.parametrize("value,error,message", [
        ("", EmptyChannelError, "channel name cannot be empty"),
        ("1.0////", TooManyComponentsError, "channel name has too many components: 1.0////"),
        ("a/b/c/d", TooManyComponentsError, "channel name has too many components: a/b/c/d"),
        ("1.0/cand", InvalidRiskError, "invalid risk in channel name: 1.0/cand"),
        ("fix//hotfix", InvalidRiskError, "invalid risk in channel name: fix//hotfix"),
        ("/stable/", InvalidTrackError, "invalid track in channel name: /stable/"),
        ("//stable", InvalidRiskError, "invalid risk in channel name: //stable"),
        ("stable/", InvalidBranchError, "invalid branch in channel name: stable/"),
        ("/stable", InvalidTrackError, "invalid track in channel name: /stable"),
    ])
    def test_errors(self, value, error, message):
        with pytest.raises(error) as exc:
            parse(value)
        assert str(exc.value) == message
        with pytest.raises(error):
            parse_verbatim(value)

    @pytest.mark.parametrize("value,expected", [
        ("1.0////", "1.0/stable"),
        ("/stable/", "latest/stable"),
        ("//stable", "latest/stable"),
        ("stable/", "latest/stable"),
        ("/stable", "latest/stable"),
    ])
    def test_full_accepts_what_parse_rejects(self, value, expected):
        # full() stays permissive for historically malformed channel strings
        assert full(value) == expected


class TestChannelMethods:
    @pytest.mark.parametrize("value,expected", [
        ("stable", "stable"),
        ("latest/stable", "stable"),
        ("1.0/edge", "1.0/edge"),
        ("1.0/beta/foo", "1.0/beta/foo"),
        ("1.0", "1.0/stable"),
        ("candidate/foo", "candidate/foo"),
    ])
    def test_str(self, value, expected):
        assert str(parse(value)) == expected

    @pytest.mark.parametrize("value,expected", [
        ("stable", "latest/stable"),
        ("latest/stable", "latest/stable"),
        ("1.0/edge", "1.0/edge"),
        ("1.0/beta/foo", "1.0/beta/foo"),
        ("1.0", "1.0/stable"),
        ("candidate/foo", "latest/candidate/foo"),
    ])
    def test_full(self, value, expected):
        assert parse(value).full() == expected

    def test_full_of_empty_channel(self):
        assert EMPTY_CHANNEL.full() == ""

    def test_clean(self):
        ch = Channel(track="latest", name="latest/stable", risk=Risk.STABLE)
        cleaned = ch.clean()
        assert cleaned != ch
        assert cleaned == Channel(track="", name="stable", risk=Risk.STABLE)

    def test_is_empty(self):
        assert Channel().is_empty
        assert not parse("stable").is_empty

    def test_frozen(self):
        ch = parse("stable")
        with pytest.raises(ValidationError):
            ch.track = "1.0"

    def test_hashable(self):
        assert len({parse("stable"), parse("latest/stable"), parse("1.0")}) == 2


class TestFull:
    @pytest.mark.parametrize("value,expected", [
        ("stable", "latest/stable"),
        ("latest/stable", "latest/stable"),
        ("1.0/edge", "1.0/edge"),
        ("1.0/beta/foo", "1.0/beta/foo"),
        ("1.0", "1.0/stable"),
        ("candidate/foo", "latest/candidate/foo"),
        # store compatibility
        ("//stable//", "latest/stable"),
        ("///", ""),
        ("", ""),
    ])
    def test_full(self, value, expected):
        assert full(value) == expected

    def test_too_many_components(self):
        with pytest.raises(InvalidChannelError, match="invalid channel: foo/bar/baz/quux"):
            full("foo/bar/baz/quux")

    def test_three_components_not_validated(self):
        assert full("1.0/cand/foo") == "1.0/cand/foo"


class TestMatch:
    @pytest.mark.parametrize("requested,candidate,expected", [
        ("stable", "stable", "track:risk"),
        ("stable", "beta", "track"),
        ("beta", "stable", "track:risk"),
        ("stable", "edge", "track"),
        ("edge", "stable", "track:risk"),
        ("1.0/stable", "1.0/edge", "track"),
        ("1.0/edge", "stable", "risk"),
        ("1.0/stable", "stable", "risk"),
        ("1.0/stable", "beta", ""),
        ("1.0/stable", "2.0/beta", ""),
        ("2.0/stable", "2.0/beta", "track"),
    ])
    def test_match(self, requested, candidate, expected):
        assert str(parse(requested).match(parse(candidate))) == expected

    def test_requesting_stable_rejects_edge(self):
        assert parse("1.0/stable").match(parse("1.0/edge")) == Match(track=True, risk=False)

    def test_unknown_risk_only_matches_unknown(self):
        # Unknown ranks -1: it matches another unknown risk and nothing else.
        requested = parse_verbatim("1.0")
        assert requested.match(parse_verbatim("1.0")) == Match(track=True, risk=True)
        assert requested.match(parse("1.0/stable")) == Match(track=True, risk=False)
        assert parse("1.0/stable").match(requested) == Match(track=True, risk=True)

    def test_match_str(self):
        assert str(Match()) == ""
        assert str(Match(track=True, risk=True)) == "track:risk"


class TestSerialization:
    def test_branch_omitted_when_empty(self):
        assert parse("20.04/stable").model_dump(mode="json") == {
            "name": "20.04/stable",
            "track": "20.04",
            "risk": "stable",
        }

    def test_branch_included(self):
        assert parse("1.0/beta/foo").model_dump(mode="json") == {
            "name": "1.0/beta/foo",
            "track": "1.0",
            "risk": "beta",
            "branch": "foo",
        }

    def test_json(self):
        assert parse("stable").model_dump_json() == '{"name":"stable","track":"","risk":"stable"}'

    @pytest.mark.parametrize("value", ["stable", "1.0/edge", "1.0/beta/foo", "candidate/foo"])
    def test_round_trip(self, value):
        ch = parse(value)
        assert Channel.model_validate_json(ch.model_dump_json()) == ch
