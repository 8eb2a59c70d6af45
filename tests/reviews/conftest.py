from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def reviews_bed():
    from reviews.domain import reviews

    bed = DomainFixture(reviews)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(reviews_bed):
    with reviews_bed.domain_context():
        yield


@pytest.fixture()
def sample_file():
    return DATA_DIR / "sample.json"


@pytest.fixture()
def sample_reviews(sample_file):
    """Seed reviews "1" and "2" from the sample data file."""
    from reviews.review.seed import load_reviews

    return load_reviews(sample_file)
