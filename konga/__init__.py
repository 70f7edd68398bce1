"""Konga seed data.

Default records a Konga deployment writes into storage the first time it starts.

- ``konga.seeds``: the seed sequences themselves, e.g. ``KONG_NODE_SEED``, plus
  ``seed_rows`` to render them as storage rows.
- ``konga.core.models``: the immutable record types the seeds are built from.
- ``konga.core.clock``: the injectable time source used for ``created_at`` and
  ``updated_at``.

Persisting the rows and deciding when to do so belong to the application that
imports this package.
"""
