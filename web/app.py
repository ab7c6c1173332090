from __future__ import annotations
from typing import List, Dict, Any
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from fastapi.middleware.cors import CORSMiddleware
from letterbox import service
from letterbox.app import solve_letter_boxed, SolveParams
from letterbox.config import settings
from letterbox.errors import DictionaryLoadError
from letterbox.io_utils import validate_groups
from letterbox.session import Session

app = FastAPI(title="Letter Boxed Solver API", version="1.0")

# CORS: allow browser frontend to call backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class SolveRequest(BaseModel):
    groups: List[str] = Field(..., description="Exactly 4 groups of 3 letters, e.g. ['ABC', 'DEF', 'GHI', 'JKL'].")
    max_length: int = settings.max_word_length

class SubmitRequest(BaseModel):
    groups: List[str] = Field(..., description="Exactly 4 groups of 3 letters.")

class DiscardRequest(BaseModel):
    index: int = Field(..., ge=0, description="Position of the word to discard in the current sequence.")

def get_session(session_id: str) -> Session:
    session = service.SESSIONS.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session

@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "dictionary": service.DICTIONARY.state.value}

@app.on_event("startup")
def startup_message():
    print("\nLetter Boxed API docs: http://127.0.0.1:8000/docs\n")

@app.post("/solve")
def solve(req: SolveRequest) -> Dict[str, Any]:
    params = SolveParams(max_length=req.max_length)
    try:
        return solve_letter_boxed(req.groups, params, service.DICTIONARY)
    except DictionaryLoadError as e:
        raise HTTPException(status_code=502, detail=f"Error loading dictionary: {e}")

@app.post("/sessions")
def create_session() -> Dict[str, Any]:
    session_id, session = service.SESSIONS.create()
    return {"ok": True, "session_id": session_id, "session": session.to_dict()}

@app.get("/sessions/{session_id}")
def read_session(session_id: str) -> Dict[str, Any]:
    session = get_session(session_id)
    return {"ok": True, "session_id": session_id, "session": session.to_dict()}

@app.delete("/sessions/{session_id}")
def delete_session(session_id: str) -> Dict[str, Any]:
    if not service.SESSIONS.delete(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return {"ok": True}

@app.post("/sessions/{session_id}/submit")
def submit(session_id: str, req: SubmitRequest) -> Dict[str, Any]:
    session = get_session(session_id)
    groups = [g.strip().upper() for g in req.groups]

    ok, msg = validate_groups(groups)
    if not ok:
        return {"ok": False, "error": msg}

    try:
        outcome = session.submit(groups)
    except DictionaryLoadError as e:
        raise HTTPException(status_code=502, detail=f"Error loading dictionary: {e}")
    return outcome.to_dict()

@app.post("/sessions/{session_id}/discard")
def discard(session_id: str, req: DiscardRequest) -> Dict[str, Any]:
    session = get_session(session_id)
    try:
        outcome = session.discard_and_regenerate(req.index)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return outcome.to_dict()

@app.post("/sessions/{session_id}/reset")
def reset(session_id: str) -> Dict[str, Any]:
    session = get_session(session_id)
    session.reset()
    return {"ok": True, "session": session.to_dict()}
