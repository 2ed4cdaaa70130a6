"""Properties app package.

This app encapsulates the real-estate catalogue: owners, properties with
their images and the append-only price ledger, the paginated search and
the services orchestrating them.
"""
