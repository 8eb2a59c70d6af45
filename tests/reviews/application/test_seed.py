"""Application tests for loading reviews from a JSON data file."""

import json
from datetime import UTC, datetime

from protean import current_domain
from reviews.review.review import Review
from reviews.review.seed import load_reviews, parse_date


class TestParseDate:
    def test_parses_wire_format(self):
        assert parse_date("2018-11-10T11:38:26.855+0000") == datetime(2018, 11, 10, 11, 38, 26, 855000, tzinfo=UTC)

    def test_empty_is_none(self):
        assert parse_date(None) is None
        assert parse_date("") is None


class TestLoadReviews:
    def test_loads_every_review(self, sample_file):
        loaded = load_reviews(sample_file)

        assert [r.id for r in loaded] == ["1", "2"]
        assert len(current_domain.repository_for(Review).get_all()) == 2

    def test_keeps_ids_versions_and_dates(self, sample_file):
        load_reviews(sample_file)

        review = current_domain.repository_for(Review).get("1")
        assert review.product_id == 1
        assert review.version == 1
        assert review.entries[0].username == "user1"
        assert review.entries[0].review == "This is a review"
        assert review.entries[0].date == datetime(2018, 11, 10, 11, 38, 26, 855000, tzinfo=UTC)

    def test_preserves_entry_order(self, sample_file):
        load_reviews(sample_file)

        review = current_domain.repository_for(Review).get("2")
        assert [e.username for e in review.entries] == ["user2", "user3", "user4"]

    def test_reloading_overwrites_existing_reviews(self, sample_file, tmp_path):
        load_reviews(sample_file)

        changed = tmp_path / "changed.json"
        changed.write_text(
            json.dumps([{"id": "1", "productId": 11, "version": 4, "entries": []}]),
            encoding="utf-8",
        )
        load_reviews(changed)

        review = current_domain.repository_for(Review).get("1")
        assert review.product_id == 11
        assert review.version == 4
        assert review.entries == []
        assert len(current_domain.repository_for(Review).get_all()) == 2
