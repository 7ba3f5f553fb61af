from __future__ import annotations

import logging
import os

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_visit_stats
from .auth.dependencies import require_user
from .auth.models import LoginRequest
from .auth.users import authenticate
from .maps.locations import map_locations_for
from .maps.models import MapLocation, MapTokenResponse
from .maps.token import MapTokenNotConfigured, get_map_token
from .places.client import PlacesNotConfigured, PlacesSearchError
from .search.categories import CUISINE_CATEGORIES
from .search.filters import PRICE_TIERS, filter_results
from .search.models import (
    DEFAULT_MAX_DISTANCE,
    DEFAULT_MAX_PRICE,
    DEFAULT_MIN_RATING,
    FilterRequest,
    PlaceResult,
    SearchRequest,
    SearchResponse,
)
from .search.service import InvalidSearchError, run_search
from .storage import checkins, lists
from .storage.models import (
    LIST_COLORS,
    AddToListRequest,
    CheckInCreate,
    CheckInOut,
    CheckInUpdate,
    ListCreate,
    ListDetail,
    ListSummary,
    ListUpdate,
    Restaurant,
    RestaurantList,
)
from .storage.store import AlreadyInListError, NotFoundError, NotOwnerError, StorageError

logger = logging.getLogger(__name__)

app = FastAPI(title="Foodlog API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "foodlog-secret-change-in-production"),
)


def _storage_http_error(exc: StorageError) -> HTTPException:
    if isinstance(exc, NotOwnerError):
        return HTTPException(status_code=403, detail=str(exc))
    if isinstance(exc, AlreadyInListError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=500, detail="Storage error")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "cuisine_categories": CUISINE_CATEGORIES,
        "price_tiers": PRICE_TIERS,
        "list_colors": LIST_COLORS,
        "filter_defaults": {
            "max_price": DEFAULT_MAX_PRICE,
            "min_rating": DEFAULT_MIN_RATING,
            "max_distance": DEFAULT_MAX_DISTANCE,
        },
    }


@app.get("/map/token", response_model=MapTokenResponse)
def map_token() -> MapTokenResponse:
    try:
        return MapTokenResponse(token=get_map_token())
    except MapTokenNotConfigured:
        raise HTTPException(status_code=500, detail={"error": "Mapbox token not configured"})


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Discovery ────────────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(body: SearchRequest, user: dict = Depends(require_user)) -> SearchResponse:
    try:
        return run_search(body)
    except InvalidSearchError as exc:
        raise HTTPException(
            status_code=400, detail={"error": exc.reason, "message": exc.message},
        )
    except PlacesNotConfigured:
        logger.error("Google Places API key not configured")
        raise HTTPException(status_code=500, detail="Service configuration error")
    except PlacesSearchError:
        logger.warning("Error searching restaurants", exc_info=True)
        raise HTTPException(
            status_code=502, detail="Unable to search restaurants. Please try again.",
        )


@app.post("/search/filter", response_model=list[PlaceResult])
def refilter(body: FilterRequest, user: dict = Depends(require_user)) -> list[PlaceResult]:
    # Re-applies thresholds to results the client already has; no API call.
    return filter_results(
        body.restaurants,
        max_price=body.max_price,
        min_rating=body.min_rating,
        max_distance=body.max_distance,
    )


@app.get("/map/locations", response_model=list[MapLocation])
def map_locations(user: dict = Depends(require_user)) -> list[MapLocation]:
    return map_locations_for(user["id"])


# ── Check-ins ────────────────────────────────────────────────────────────


@app.get("/stats")
def stats(user: dict = Depends(require_user)) -> dict:
    return compute_visit_stats(checkins.user_check_ins(user["id"]))


@app.get("/check-ins", response_model=list[CheckInOut])
def list_check_ins(user: dict = Depends(require_user)) -> list[CheckInOut]:
    return checkins.list_check_ins(user["id"])


@app.get("/check-ins/recent", response_model=list[CheckInOut])
def recent_check_ins(user: dict = Depends(require_user)) -> list[CheckInOut]:
    return checkins.recent_check_ins(user["id"])


@app.post("/check-ins", response_model=CheckInOut, status_code=201)
def create_check_in(body: CheckInCreate, user: dict = Depends(require_user)) -> CheckInOut:
    try:
        return checkins.create_check_in(user["id"], body)
    except StorageError as exc:
        raise _storage_http_error(exc)


@app.get("/check-ins/{check_in_id}", response_model=CheckInOut)
def get_check_in(check_in_id: str, user: dict = Depends(require_user)) -> CheckInOut:
    try:
        return checkins.get_check_in(check_in_id, user["id"])
    except StorageError as exc:
        raise _storage_http_error(exc)


@app.patch("/check-ins/{check_in_id}", response_model=CheckInOut)
def update_check_in(
    check_in_id: str,
    body: CheckInUpdate,
    user: dict = Depends(require_user),
) -> CheckInOut:
    try:
        return checkins.update_check_in(check_in_id, user["id"], body)
    except StorageError as exc:
        raise _storage_http_error(exc)


@app.delete("/check-ins/{check_in_id}")
def delete_check_in(check_in_id: str, user: dict = Depends(require_user)) -> dict:
    try:
        checkins.delete_check_in(check_in_id, user["id"])
    except StorageError as exc:
        raise _storage_http_error(exc)
    return {"status": "deleted"}


# ── Lists ────────────────────────────────────────────────────────────────


@app.get("/lists", response_model=list[ListSummary])
def user_lists(user: dict = Depends(require_user)) -> list[ListSummary]:
    return lists.lists_for_user(user["id"])


@app.post("/lists", response_model=RestaurantList, status_code=201)
def create_list(body: ListCreate, user: dict = Depends(require_user)) -> RestaurantList:
    return lists.create_list(user["id"], body)


@app.get("/lists/{list_id}", response_model=ListDetail)
def get_list(list_id: str, user: dict = Depends(require_user)) -> ListDetail:
    try:
        return lists.get_list(list_id, user["id"])
    except StorageError as exc:
        raise _storage_http_error(exc)


@app.patch("/lists/{list_id}", response_model=RestaurantList)
def update_list(
    list_id: str,
    body: ListUpdate,
    user: dict = Depends(require_user),
) -> RestaurantList:
    try:
        return lists.update_list(list_id, user["id"], body)
    except StorageError as exc:
        raise _storage_http_error(exc)


@app.delete("/lists/{list_id}")
def delete_list(list_id: str, user: dict = Depends(require_user)) -> dict:
    try:
        lists.delete_list(list_id, user["id"])
    except StorageError as exc:
        raise _storage_http_error(exc)
    return {"status": "deleted"}


@app.post("/lists/{list_id}/restaurants", response_model=Restaurant, status_code=201)
def add_to_list(
    list_id: str,
    body: AddToListRequest,
    user: dict = Depends(require_user),
) -> Restaurant:
    try:
        return lists.add_to_list(list_id, user["id"], body)
    except StorageError as exc:
        raise _storage_http_error(exc)


@app.delete("/lists/{list_id}/restaurants/{restaurant_id}")
def remove_from_list(
    list_id: str,
    restaurant_id: str,
    user: dict = Depends(require_user),
) -> dict:
    try:
        lists.remove_from_list(list_id, user["id"], restaurant_id)
    except StorageError as exc:
        raise _storage_http_error(exc)
    return {"status": "removed"}
