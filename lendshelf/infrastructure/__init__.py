"""Infrastructure Layer: database, identity, blob storage and logging adapters.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver exceptions mapped to LendShelfError subclasses at this boundary
"""
