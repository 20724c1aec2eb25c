"""API router subpackage for the points explorer backend.

Each module exposes its own APIRouter for composition in the application's
main FastAPI instance.

Submodules:
    - points: Client configuration, the static seed asset, paged access to
      the expanded dataset, its value domain and visible-point counts.
    - filters: Reading and updating the GPU filter properties of the
      points layer.
"""
