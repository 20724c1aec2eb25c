"""API endpoint tests for points layer filter updates.

This module provides tests for GET and POST on
/api/layers/points-layer/filters, verifying that filter selections reach
the layer through the double-buffered applicator, that the dataset is left
untouched and that malformed selections are rejected.

See Also:
    - backend/points_explorer/api/filters.py for API implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import testclient

from points_explorer import main
from points_explorer.api import points as api_points
from points_explorer.core import config
from points_explorer.services import expansion, normalize, points_layer

if TYPE_CHECKING:
    from collections.abc import Iterator

FILTERS_URL = "/api/layers/points-layer/filters"


@pytest.fixture
def session() -> points_layer.PointsSession:
    settings = config.Settings()
    seed = normalize.normalize_seed_points(
        [{"position": [1, 2]}, {"position": [3, 4], "category": "beta"}],
        categories=settings.categories,
        settings=settings,
    )
    collection = expansion.expand_points(seed, target_count=40, settings=settings)
    return points_layer.build_session(collection, settings=settings)


@pytest.fixture
def client(session: points_layer.PointsSession) -> Iterator[testclient.TestClient]:
    app = main.create_app()
    app.dependency_overrides[api_points.get_session] = lambda: session
    try:
        yield testclient.TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_initial_filters(client: testclient.TestClient) -> None:
    """Before any update the layer shows the full range and all categories."""
    response = client.get(FILTERS_URL)

    assert response.status_code == 200
    assert response.json() == {
        "filterRange": [0, 100],
        "filterCategories": ["alpha", "beta", "gamma", "delta", "epsilon"],
    }


def test_apply_filters(
    client: testclient.TestClient,
    session: points_layer.PointsSession,
) -> None:
    """A posted selection is pushed to the layer and echoed back."""
    data = session.layer.props["data"]

    response = client.post(
        FILTERS_URL,
        json={
            "valueMin": 20,
            "valueMax": 80,
            "selectedCategoryIds": ["alpha"],
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "filterRange": [20, 80],
        "filterCategories": ["alpha"],
    }
    assert client.get(FILTERS_URL).json() == response.json()
    assert session.applicator.calls == 1
    assert session.layer.props["data"] is data


def test_successive_updates_alternate_buffers(
    client: testclient.TestClient,
    session: points_layer.PointsSession,
) -> None:
    """Each request hands the layer a different buffer than the last one."""
    seen = []
    for low in (10, 20, 30):
        client.post(
            FILTERS_URL,
            json={"valueMin": low, "valueMax": 90, "selectedCategoryIds": []},
        )
        seen.append(session.layer.props["filterRange"])

    assert seen[0] is not seen[1]
    assert seen[2] is seen[0]
    assert seen[2] == [30, 90]


def test_categories_default_to_empty(client: testclient.TestClient) -> None:
    """Omitting the category list deselects every category."""
    response = client.post(FILTERS_URL, json={"valueMin": 0, "valueMax": 100})

    assert response.status_code == 200
    assert response.json()["filterCategories"] == []


def test_snake_case_fields_accepted(client: testclient.TestClient) -> None:
    """Field names are accepted in snake case as well."""
    response = client.post(
        FILTERS_URL,
        json={
            "value_min": 5,
            "value_max": 6,
            "selected_category_ids": ["gamma"],
        },
    )

    assert response.status_code == 200
    assert response.json()["filterCategories"] == ["gamma"]


@pytest.mark.parametrize(
    "body",
    [
        {"valueMax": 100},
        {"valueMin": "low", "valueMax": 100},
        {"valueMin": 0, "valueMax": 100, "selectedCategoryIds": "alpha"},
    ],
)
def test_invalid_selection_rejected(
    client: testclient.TestClient,
    session: points_layer.PointsSession,
    body: dict[str, object],
) -> None:
    """Malformed selections are rejected before reaching the layer."""
    response = client.post(FILTERS_URL, json=body)

    assert response.status_code == 422
    assert session.applicator.calls == 0


def test_filters_unavailable_without_session() -> None:
    """Without a loaded dataset the filter endpoints return 503."""
    client = testclient.TestClient(main.create_app())
    assert client.get(FILTERS_URL).status_code == 503
    response = client.post(FILTERS_URL, json={"valueMin": 0, "valueMax": 1})
    assert response.status_code == 503
