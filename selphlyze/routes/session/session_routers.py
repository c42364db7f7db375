from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from selphlyze.core.database import get_db
from selphlyze.models.session_db.session_crud import (
    ResultStoreError,
    client_metadata,
    get_test_session,
    save_test_session,
)
from selphlyze.schemas.session.session_base import SaveResultsRequest, SaveResultsResponse, TestSessionOut

session_router = APIRouter(prefix="/api/save-results", tags=["Results"])


@session_router.post("", response_model=SaveResultsResponse)
def save_results(body: SaveResultsRequest, request: Request, db: Session = Depends(get_db)):
    try:
        session_id = save_test_session(db, body, client_metadata(request.headers))
    except ResultStoreError:
        return JSONResponse(status_code=500, content={"error": "Failed to save results"})
    return SaveResultsResponse(success=True, session_id=session_id)


@session_router.get("/{session_id}", response_model=TestSessionOut)
def get_results(session_id: UUID, db: Session = Depends(get_db)):
    test_session = get_test_session(db, session_id)
    if not test_session:
        raise HTTPException(status_code=404, detail="Test session not found")
    return test_session
