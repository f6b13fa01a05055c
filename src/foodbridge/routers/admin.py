"""Admin dashboard endpoints"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel, Field

from foodbridge.auth.dependencies import get_auth_session, require_admin
from foodbridge.auth.session import AuthSession
from foodbridge.dependencies import get_admin_login_log, get_volunteer_repository
from foodbridge.models.catalog import SHIFTS
from foodbridge.services.admin_login_log import AdminLoginLog
from foodbridge.services.approval_workflow import ApprovalWorkflow
from foodbridge.services.export_service import VolunteerExporter, export_filename
from foodbridge.services.volunteer_repository import VolunteerRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


class LoginRequest(BaseModel):
    email: str = Field(..., json_schema_extra={"example": "admin@ngo.org"})
    password: str = Field(...)


def _download(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/login")
async def login(
    request: LoginRequest, session: AuthSession = Depends(get_auth_session)
):
    if not session.login(request.email, request.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )
    return {"success": True, **session.to_dict()}


@router.post("/logout")
async def logout(session: AuthSession = Depends(get_auth_session)):
    session.logout()
    return session.to_dict()


@router.get("/session")
async def get_session(session: AuthSession = Depends(get_auth_session)):
    return session.to_dict()


@router.get("/volunteers")
async def list_volunteers(
    _admin: AuthSession = Depends(require_admin),
    repository: VolunteerRepository = Depends(get_volunteer_repository),
):
    """Roster with the per-status totals shown on the overview cards"""
    workflow = ApprovalWorkflow(repository)
    return {
        "volunteers": [v.to_storage() for v in workflow.volunteers],
        "total": len(workflow.volunteers),
        "counts": {s.value: n for s, n in workflow.status_counts().items()},
    }


@router.post("/volunteers/{volunteer_id}/approve")
async def approve_volunteer(
    volunteer_id: str,
    admin: AuthSession = Depends(require_admin),
    repository: VolunteerRepository = Depends(get_volunteer_repository),
):
    workflow = ApprovalWorkflow(repository)
    if workflow.find(volunteer_id) is None:
        raise HTTPException(status_code=404, detail="Volunteer not found")

    if not workflow.approve(volunteer_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Volunteer could not be approved",
        )

    logger.info(f"{admin.identity} approved volunteer {volunteer_id}")
    return {"success": True, "volunteer": workflow.find(volunteer_id).to_storage()}


@router.get("/shifts")
async def list_shifts(_admin: AuthSession = Depends(require_admin)):
    return {"shifts": [shift.model_dump(by_alias=True) for shift in SHIFTS]}


@router.get("/export/volunteers.csv")
async def export_volunteers_csv(
    _admin: AuthSession = Depends(require_admin),
    repository: VolunteerRepository = Depends(get_volunteer_repository),
    login_log: AdminLoginLog = Depends(get_admin_login_log),
):
    exporter = VolunteerExporter(repository, login_log)
    return _download(
        exporter.to_csv(),
        "text/csv; charset=utf-8",
        export_filename("volunteers", "csv"),
    )


@router.get("/export/volunteers.json")
async def export_volunteers_json(
    _admin: AuthSession = Depends(require_admin),
    repository: VolunteerRepository = Depends(get_volunteer_repository),
    login_log: AdminLoginLog = Depends(get_admin_login_log),
):
    exporter = VolunteerExporter(repository, login_log)
    return _download(
        exporter.to_json(), "application/json", export_filename("volunteers", "json")
    )


@router.get("/export/admin-logins.json")
async def export_admin_logins_json(
    _admin: AuthSession = Depends(require_admin),
    repository: VolunteerRepository = Depends(get_volunteer_repository),
    login_log: AdminLoginLog = Depends(get_admin_login_log),
):
    exporter = VolunteerExporter(repository, login_log)
    return _download(
        exporter.admin_logins_to_json(),
        "application/json",
        export_filename("admin_logins", "json"),
    )
