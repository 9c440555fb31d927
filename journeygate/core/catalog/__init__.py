"""Rule catalogs and stage lookup tables.

Responsibilities:
  - Provide the immutable protection/progression catalog consumed by the engines.
  - Must not perform evaluation; tables and lookups only.
"""
