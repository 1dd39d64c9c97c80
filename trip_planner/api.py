"""FastAPI application exposing trip planning sessions."""

from dataclasses import asdict
import threading
from typing import Any, Dict, List, Optional, Union
from uuid import uuid4

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import get_settings
from .errors import DateOutOfRange, TripPlannerError
from .models import pricing_summary_to_dict
from .planner import TripSession
from .services.catalog import BOARD_TYPES, COUNTRIES, hotels_for, meals_for
from .trip_config import FIELD_ALIASES
from .utils import coerce_days


app = FastAPI(title="Trip Planner", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_sessions: Dict[str, TripSession] = {}
_sessions_lock = threading.Lock()


class TripConfigPayload(BaseModel):
    citizenship: Optional[str] = None
    start_date: Optional[str] = None
    days: Optional[Union[int, str]] = None
    destination: Optional[str] = None
    board_type: Optional[str] = None


class ConfigUpdatePayload(BaseModel):
    key: str
    value: Any = None


class BoardTypePayload(BaseModel):
    code: str


class HotelPayload(BaseModel):
    hotel_id: Optional[int] = None


class MealPayload(BaseModel):
    meal_id: Optional[int] = None


def _get_session(session_id: str) -> TripSession:
    with _sessions_lock:
        session = _sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}.")
    return session


def _client_value(key: str, value: Any) -> Any:
    """Apply the client-facing cap on trip length; the core accepts any count."""

    if FIELD_ALIASES.get(key) == "days":
        return min(coerce_days(value), get_settings().max_days)
    return value


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/catalog/countries")
def list_countries() -> List[Dict[str, Any]]:
    return [asdict(country) for country in COUNTRIES]


@app.get("/catalog/board-types")
def list_board_types() -> List[Dict[str, Any]]:
    return [asdict(board_type) for board_type in BOARD_TYPES]


@app.get("/catalog/{destination}")
def destination_catalog(destination: str) -> Dict[str, Any]:
    return {
        "destination": destination,
        "hotels": [asdict(hotel) for hotel in hotels_for(destination)],
        "meals": asdict(meals_for(destination)),
    }


@app.post("/sessions", status_code=201)
def create_session(payload: Optional[TripConfigPayload] = None) -> Dict[str, Any]:
    try:
        session = TripSession()
        if payload is not None:
            for key, value in payload.model_dump(exclude_none=True).items():
                session.update_config(key, _client_value(key, value))
    except TripPlannerError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    session_id = str(uuid4())
    with _sessions_lock:
        _sessions[session_id] = session
    return {"session_id": session_id, **session.to_dict()}


@app.get("/sessions/{session_id}")
def get_session(session_id: str) -> Dict[str, Any]:
    return {"session_id": session_id, **_get_session(session_id).to_dict()}


@app.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str) -> None:
    with _sessions_lock:
        if _sessions.pop(session_id, None) is None:
            raise HTTPException(status_code=404, detail=f"Unknown session {session_id}.")


@app.patch("/sessions/{session_id}/config")
def update_config(session_id: str, payload: ConfigUpdatePayload) -> Dict[str, Any]:
    session = _get_session(session_id)
    try:
        session.update_config(payload.key, _client_value(payload.key, payload.value))
    except TripPlannerError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"session_id": session_id, **session.to_dict()}


@app.put("/sessions/{session_id}/board-type")
def set_board_type(session_id: str, payload: BoardTypePayload) -> Dict[str, Any]:
    session = _get_session(session_id)
    try:
        changed = session.set_board_type(payload.code)
    except TripPlannerError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"session_id": session_id, "changed": changed, **session.to_dict()}


@app.put("/sessions/{session_id}/days/{date}/hotel")
def set_hotel(session_id: str, date: str, payload: HotelPayload) -> Dict[str, Any]:
    session = _get_session(session_id)
    try:
        session.set_hotel(date, payload.hotel_id)
    except DateOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"session_id": session_id, **session.to_dict()}


@app.put("/sessions/{session_id}/days/{date}/meals/{field}")
def set_meal(session_id: str, date: str, field: str, payload: MealPayload) -> Dict[str, Any]:
    session = _get_session(session_id)
    try:
        applied = session.set_meal(date, field, payload.meal_id)
    except DateOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except TripPlannerError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"session_id": session_id, "applied": applied, **session.to_dict()}


@app.get("/sessions/{session_id}/pricing")
def get_pricing(session_id: str) -> Dict[str, Any]:
    return pricing_summary_to_dict(_get_session(session_id).pricing())
