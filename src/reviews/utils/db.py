from protean.domain import Domain


def setup_db(domain: Domain):
    """Create the review document store (Elasticsearch indices, etc.)"""
    with domain.domain_context():
        domain.setup_database()


def drop_db(domain: Domain):
    """Drop the review document store"""
    with domain.domain_context():
        domain.drop_database()
