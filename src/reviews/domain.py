"""Reviews bounded context: product review documents and their entries.

A Review aggregates every user entry for one product. Reviews are stored as
single documents (entries embedded) in the configured database provider.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
reviews = Domain(name="reviews")
