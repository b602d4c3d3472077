"""
Metadata server test suite

Structure:
- unit/: data model, document builder, asset loading, config, logging
- integration/: HTTP endpoints through FastAPI's TestClient
"""
