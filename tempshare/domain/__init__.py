"""
Domain Layer

Pure domain logic: object naming, expiration metadata and error taxonomy.
"""
