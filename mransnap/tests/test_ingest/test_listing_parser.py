"""Tests for snapshot listing parsing."""

from mransnap.ingest.listing_parser import parse_snapshot_listing


class TestParseSnapshotListing:
    def test_html_index(self, index_html: str):
        dates = parse_snapshot_listing(index_html.splitlines())
        assert dates == ["2014-09-17", "2014-09-18", "2020-01-01"]

    def test_anchor_text_wins_over_trailing_dates(self):
        line = '<a href="2015-01-02/">2015-01-02/</a>   2016-03-04 00:00   -'
        assert parse_snapshot_listing([line]) == ["2015-01-02"]

    def test_plain_entries(self):
        assert parse_snapshot_listing(["2020-01-01", "README", "2019-12-31"]) == [
            "2020-01-01",
            "2019-12-31",
        ]

    def test_order_preserved(self):
        lines = ["2020-01-01", "2014-09-17", "2017-05-05"]
        assert parse_snapshot_listing(lines) == lines

    def test_no_dates(self):
        assert parse_snapshot_listing(["<html>", "<a href=\"../\">../</a>"]) == []

    def test_empty(self):
        assert parse_snapshot_listing([]) == []
