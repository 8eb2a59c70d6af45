"""Load reviews from a JSON data file.

The file holds a JSON array in the same shape the API returns::

    [{"id": "1", "productId": 1, "version": 1,
      "entries": [{"username": "user1",
                   "date": "2018-11-10T11:38:26.855+0000",
                   "review": "This is a review"}]}]

Ids, versions and entry dates are stored exactly as given.
"""

import json
from datetime import datetime
from pathlib import Path

import structlog
from protean.core.unit_of_work import UnitOfWork
from protean.utils.globals import current_domain

from reviews.review.review import Review, ReviewEntry

logger = structlog.get_logger(__name__)

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


def parse_date(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.strptime(value, DATE_FORMAT)


def review_from_document(document: dict) -> Review:
    """Build a Review from a wire-format document, keeping id and version."""
    entries = [
        ReviewEntry(
            username=entry["username"],
            date=parse_date(entry.get("date")),
            review=entry.get("review"),
        )
        for entry in document.get("entries") or []
    ]

    kwargs = {
        "product_id": document["productId"],
        "version": document.get("version") or 1,
        "entries": entries,
    }
    if document.get("id"):
        kwargs["id"] = str(document["id"])

    return Review(**kwargs)


def load_reviews(path: str | Path) -> list[Review]:
    """Store every review in ``path``; existing ids are overwritten."""
    with open(path, encoding="utf-8") as f:
        documents = json.load(f)

    repo = current_domain.repository_for(Review)
    loaded = []

    with UnitOfWork():
        for document in documents:
            review = review_from_document(document)

            existing = repo.get(review.id)
            if existing is not None:
                existing.replace_entries(review.product_id, review.entries)
                existing.version = review.version
                review = existing

            loaded.append(repo.put(review))

    logger.info("reviews_seeded", path=str(path), count=len(loaded))
    return loaded
