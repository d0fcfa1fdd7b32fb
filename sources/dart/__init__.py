"""
DART (Data Analysis, Retrieval and Transfer System) OpenAPI access.

Corp code ZIP archive and single-company financial statements, called
server-side with the proxy's API key.
"""
