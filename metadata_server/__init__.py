"""
Marinade Leader metadata server

- GET /ml/{index}   -> NFT metadata JSON for leader #index (any non-negative int)
- GET /leader.jpeg  -> bundled leader image (image/jpeg)
- GET /health       -> liveness + asset digest
- CORS: any origin, GET only
"""
