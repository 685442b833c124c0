"""Fixed interpretation catalogs, one module per instrument.

Catalog text is in Spanish, as presented to recruiters.
"""
