from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest

from foodlog.places.client import (
    PlacesNotConfigured,
    PlacesSearchError,
    build_params,
    search_places,
)
from foodlog.places.config import PlacesConfig
from foodlog.search.models import Coordinate

CONFIG = PlacesConfig(api_key="test-key")

SAMPLE_PLACE = {
    "place_id": "abc123",
    "name": "Joe's Pizza",
    "formatted_address": "7 Carmine St, New York",
    "geometry": {"location": {"lat": 40.73, "lng": -74.0}},
    "rating": 4.6,
    "price_level": 1,
    "photos": [{"photo_reference": "ref-1"}],
    "types": ["meal_takeaway", "restaurant", "food"],
}


def _mock_client(mock_client_cls, payload):
    response = MagicMock()
    response.json.return_value = payload
    client = MagicMock()
    client.get.return_value = response
    mock_client_cls.return_value.__enter__.return_value = client
    return client


def test_build_params_without_location():
    params = build_params("pizza", None, CONFIG)
    assert params == {"query": "pizza restaurant", "type": "restaurant", "key": "test-key"}


def test_build_params_with_location():
    params = build_params("pizza", Coordinate(lat=40.7, lng=-74.0), CONFIG)
    assert params["location"] == "40.7,-74.0"
    assert params["radius"] == "10000"


@patch("foodlog.places.client.httpx.Client")
def test_search_maps_results(mock_client_cls):
    client = _mock_client(mock_client_cls, {"status": "OK", "results": [SAMPLE_PLACE]})

    results = search_places("pizza", config=CONFIG)

    assert len(results) == 1
    r = results[0]
    assert r.google_place_id == "abc123"
    assert r.name == "Joe's Pizza"
    assert r.address == "7 Carmine St, New York"
    assert r.latitude == 40.73
    assert r.longitude == -74.0
    assert r.rating == 4.6
    assert r.price_level == 1
    assert r.cuisine_type == "meal_takeaway"
    assert "photoreference=ref-1" in r.image_url
    assert "maxwidth=400" in r.image_url
    client.get.assert_called_once()


@patch("foodlog.places.client.httpx.Client")
def test_search_handles_sparse_place(mock_client_cls):
    _mock_client(mock_client_cls, {
        "status": "OK",
        "results": [{"place_id": "p", "name": "Bare", "types": ["bar"]}],
    })

    r = search_places("bare", config=CONFIG)[0]
    assert r.image_url is None
    assert r.latitude is None
    assert r.rating is None
    assert r.cuisine_type == "restaurant"


@patch("foodlog.places.client.httpx.Client")
def test_zero_results_is_empty(mock_client_cls):
    _mock_client(mock_client_cls, {"status": "ZERO_RESULTS", "results": []})
    assert search_places("nothing", config=CONFIG) == []


@patch("foodlog.places.client.httpx.Client")
def test_bad_status_raises(mock_client_cls):
    _mock_client(mock_client_cls, {"status": "REQUEST_DENIED"})
    with pytest.raises(PlacesSearchError):
        search_places("pizza", config=CONFIG)


@patch("foodlog.places.client.httpx.Client")
def test_network_error_raises(mock_client_cls):
    client = MagicMock()
    client.get.side_effect = httpx.ConnectError("connection refused")
    mock_client_cls.return_value.__enter__.return_value = client
    with pytest.raises(PlacesSearchError):
        search_places("pizza", config=CONFIG)


@patch("foodlog.places.client.httpx.Client")
def test_missing_key_never_calls_api(mock_client_cls):
    with pytest.raises(PlacesNotConfigured):
        search_places("pizza", config=PlacesConfig(api_key=""))
    mock_client_cls.assert_not_called()


@patch("foodlog.places.client.httpx.Client")
def test_non_object_payload_raises(mock_client_cls):
    _mock_client(mock_client_cls, [])
    with pytest.raises(PlacesSearchError):
        search_places("pizza", config=CONFIG)


@patch("foodlog.places.client.httpx.Client")
def test_malformed_result_raises(mock_client_cls):
    _mock_client(mock_client_cls, {"status": "OK", "results": [{"name": None}]})
    with pytest.raises(PlacesSearchError):
        search_places("pizza", config=CONFIG)
