"""HTTP API for the Filler Analyzer (FastAPI)."""
