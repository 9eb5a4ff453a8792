"""Photo library API - access-controlled libraries, albums and photos."""
