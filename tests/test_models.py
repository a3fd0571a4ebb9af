"""Tests for the lookup models and response rendering."""

import pytest

from odds_backend.lines.models import (
    PROVIDED_BOOK,
    BestPrice,
    FetchResult,
    FetchStatus,
    GameOdds,
    Outcome,
)


class TestOutcome:
    @pytest.mark.parametrize("point", ["abc", None, float("nan"), float("inf"), True])
    def test_unusable_point_becomes_none(self, point):
        assert Outcome(name="Over", point=point, price=-110).point is None

    def test_numeric_string_point(self):
        assert Outcome(name="Over", point="46.5", price=-110).point == 46.5

    def test_price_kept_as_received(self):
        assert Outcome(name="Over", price="+120").price == "+120"

    def test_null_name(self):
        assert Outcome(name=None, price=100).name == ""


class TestGameOdds:
    def test_minimal_event(self):
        game = GameOdds.model_validate({"home_team": "A", "away_team": "B"})
        assert game.bookmakers == []

    def test_ignores_unknown_fields(self):
        game = GameOdds.model_validate(
            {"home_team": "A", "away_team": "B", "bookmakers": None, "completed": False}
        )
        assert game.bookmakers == []

    def test_non_list_bookmakers(self):
        game = GameOdds.model_validate({"home_team": "A", "bookmakers": {"key": "fanduel"}})
        assert game.bookmakers == []

    def test_junk_entries_dropped_per_item(self):
        game = GameOdds.model_validate(
            {
                "home_team": "A",
                "bookmakers": [
                    None,
                    {"key": "fanduel", "markets": [3, {"key": 5, "outcomes": [None, {"name": "A", "price": 100}]}]},
                ],
            }
        )
        assert [b.key for b in game.bookmakers] == ["fanduel"]
        market = game.bookmakers[0].markets[0]
        assert market.key == "5"
        assert [o.name for o in market.outcomes] == ["A"]


class TestFetchResultToResult:
    def test_empty_when_no_best(self):
        for status in FetchStatus:
            assert FetchResult(market="h2h", status=status).to_result() == {}

    def test_book_price(self):
        result = FetchResult(
            market="spreads",
            status=FetchStatus.FOUND,
            best=BestPrice(book="fanduel", american="-105", decimal=1.9524, implied_pct=51.22, picked_point=-2.5),
        )
        assert result.to_result() == {
            "Market": "spreads",
            "Book": "fanduel",
            "Odds": "-105",
            "Decimal": 1.9524,
            "Implied %": "51.22%",
            "Point": -2.5,
        }

    def test_h2h_never_reports_point(self):
        result = FetchResult(
            market="h2h",
            status=FetchStatus.FOUND,
            best=BestPrice(book="fanduel", american="120", decimal=2.2, implied_pct=45.45, picked_point=0.5),
        )
        assert "Point" not in result.to_result()

    def test_totals_without_point(self):
        result = FetchResult(
            market="totals",
            status=FetchStatus.FOUND,
            best=BestPrice(book="betmgm", american="-110", decimal=1.9091, implied_pct=52.38),
        )
        assert "Point" not in result.to_result()

    def test_provided_line_has_no_book(self):
        result = FetchResult(
            market="h2h",
            status=FetchStatus.SKIPPED,
            best=BestPrice(book=PROVIDED_BOOK, american="-110", decimal=1.9091, implied_pct=52.38),
        )
        out = result.to_result()
        assert "Book" not in out
        assert out["Odds"] == "-110"

    def test_uncomputable_line(self):
        result = FetchResult(
            market="h2h",
            status=FetchStatus.SKIPPED,
            best=BestPrice(book=PROVIDED_BOOK, american="abc", decimal=None, implied_pct=None),
        )
        assert result.to_result() == {"Market": "h2h", "Odds": "abc", "Decimal": "", "Implied %": ""}
