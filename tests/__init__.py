"""
Test Suite for Locations API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_locations.py: Location model, store and query service
- test_graphql.py: GraphQL schema, queries, validation, transport
- test_config.py: Settings loading and validation
- test_main.py: Root and health endpoints

Running Tests:
    pip install -e ".[test]"
    pytest -v
"""
