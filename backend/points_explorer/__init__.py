"""Backend package for the mass points explorer.

This package prepares a large synthetic point dataset for interactive map
rendering and serves it, together with a GPU filter update endpoint, over
a FastAPI application. A few hundred seed points (some with fields
deliberately missing) are normalized and deterministically expanded into
hundreds of thousands of points once per session; filter interactions
only ever change two small layer parameters, never the dataset.

- Deterministic mulberry32 PRNG and FNV-1a hashing for reproducible output
- Seed normalization with position-derived ids, values and categories
- Cyclic expansion with per-point jitter and value drift
- Double-buffered filter parameters for reference-based change detection
- Offline seed asset generation through the ``points-explorer`` CLI

See module sub-docstrings for details on each stage.
"""
