"""Review aggregate: every user entry written about one product.

A Review is stored as a single document keyed by ``id`` with its entries
embedded in insertion order. ``version`` is a public, informational counter
echoed to clients as the ``ETag`` header; it is never compared before writes.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, List, String, Text, ValueObject

from reviews.domain import reviews


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@reviews.value_object(part_of="Review")
class ReviewEntry:
    """A single timestamped review written by one user."""

    username = String(required=True, max_length=255)
    date = DateTime()
    review = Text()


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """All review entries for a product.

    ``product_id`` is not unique; nothing stops two reviews from pointing at
    the same product.
    """

    product_id = Integer(required=True)
    version = Integer(default=1)
    entries = List(content_type=ValueObject(ReviewEntry))

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def version_must_be_positive(self):
        if self.version is not None and self.version < 1:
            raise ValidationError({"version": ["Review version must be at least 1"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def for_product(cls, product_id, entries=None, review_id=None):
        """Start a review for ``product_id``, optionally with a caller-chosen id."""
        kwargs = {"product_id": product_id, "entries": list(entries or [])}
        if review_id:
            kwargs["id"] = review_id
        return cls(**kwargs)

    # -------------------------------------------------------------------
    # Behavior
    # -------------------------------------------------------------------
    def add_entry(self, username, review, date=None):
        """Append an entry, stamped with the current time unless ``date`` is given."""
        entry = ReviewEntry(
            username=username,
            review=review,
            date=date or datetime.now(UTC),
        )
        self.entries = [*self.entries, entry]
        return entry

    def replace_entries(self, product_id, entries):
        """Overwrite the product and the full entry list in one step."""
        self.product_id = product_id
        self.entries = list(entries)
