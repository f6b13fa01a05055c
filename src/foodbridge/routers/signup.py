"""Public volunteer sign-up endpoints"""

import logging
from typing import Dict, Optional

import redis
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from foodbridge.dependencies import get_wizard_state_manager
from foodbridge.models.catalog import (
    AVAILABILITY_OPTIONS,
    SKILL_OPTIONS,
    TIME_SLOTS,
    TRANSPORTATION_OPTIONS,
    get_time_slot,
)
from foodbridge.services.signup_wizard import SignupWizard
from foodbridge.services.wizard_state_manager import WizardStateManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/signup", tags=["Signup"])


class FieldsUpdateRequest(BaseModel):
    fields: Dict[str, Optional[str]] = Field(
        ...,
        description="Profile fields to set, keyed by field name",
        json_schema_extra={"example": {"firstName": "Mike", "lastName": "Chen"}},
    )


def _wizard_response(wizard_id: str, wizard: SignupWizard) -> dict:
    return {
        "wizard_id": wizard_id,
        **wizard.to_dict(),
        "can_continue": wizard.can_continue,
        "can_submit": wizard.can_submit,
    }


def _unavailable(e: redis.RedisError) -> HTTPException:
    logger.error(f"Signup storage unavailable: {e}")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Signup is temporarily unavailable",
    )


def _load_wizard(manager: WizardStateManager, wizard_id: str) -> SignupWizard:
    try:
        wizard = manager.load(wizard_id)
    except redis.RedisError as e:
        raise _unavailable(e)

    if wizard is None:
        raise HTTPException(status_code=404, detail="Signup not found or expired")
    return wizard


def _save_wizard(manager: WizardStateManager, wizard_id: str, wizard: SignupWizard):
    try:
        manager.save(wizard_id, wizard)
    except redis.RedisError as e:
        raise _unavailable(e)


@router.get("/options")
async def get_signup_options():
    """Choices offered on the profile step"""
    return {
        "availability": AVAILABILITY_OPTIONS,
        "skills": SKILL_OPTIONS,
        "transportation": TRANSPORTATION_OPTIONS,
    }


@router.get("/slots")
async def list_time_slots():
    """Shift windows offered on the schedule step"""
    return {"slots": [slot.model_dump(by_alias=True) for slot in TIME_SLOTS]}


@router.post("/wizard", status_code=status.HTTP_201_CREATED)
async def start_signup(
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    try:
        wizard_id, wizard = manager.create()
    except redis.RedisError as e:
        raise _unavailable(e)
    return _wizard_response(wizard_id, wizard)


@router.get("/wizard/{wizard_id}")
async def get_signup(
    wizard_id: str,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    wizard = _load_wizard(manager, wizard_id)
    return _wizard_response(wizard_id, wizard)


@router.patch("/wizard/{wizard_id}/fields")
async def update_signup_fields(
    wizard_id: str,
    request: FieldsUpdateRequest,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    wizard = _load_wizard(manager, wizard_id)
    try:
        for name, value in request.fields.items():
            wizard.set_field(name, value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    _save_wizard(manager, wizard_id, wizard)
    return _wizard_response(wizard_id, wizard)


@router.post("/wizard/{wizard_id}/skills/{skill}")
async def toggle_signup_skill(
    wizard_id: str,
    skill: str,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    wizard = _load_wizard(manager, wizard_id)
    wizard.toggle_skill(skill)
    _save_wizard(manager, wizard_id, wizard)
    return _wizard_response(wizard_id, wizard)


@router.post("/wizard/{wizard_id}/slots/{slot_id}")
async def toggle_signup_slot(
    wizard_id: str,
    slot_id: str,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    wizard = _load_wizard(manager, wizard_id)
    if get_time_slot(slot_id) is None:
        raise HTTPException(status_code=404, detail="Time slot not found")

    wizard.toggle_slot(slot_id)
    _save_wizard(manager, wizard_id, wizard)
    return _wizard_response(wizard_id, wizard)


@router.post("/wizard/{wizard_id}/continue")
async def continue_signup(
    wizard_id: str,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    wizard = _load_wizard(manager, wizard_id)
    if not wizard.continue_to_schedule():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="First name, last name and email are required to continue",
        )

    _save_wizard(manager, wizard_id, wizard)
    return _wizard_response(wizard_id, wizard)


@router.post("/wizard/{wizard_id}/back")
async def back_to_profile(
    wizard_id: str,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    wizard = _load_wizard(manager, wizard_id)
    wizard.back()
    _save_wizard(manager, wizard_id, wizard)
    return _wizard_response(wizard_id, wizard)


@router.post("/wizard/{wizard_id}/submit")
async def submit_signup(
    wizard_id: str,
    manager: WizardStateManager = Depends(get_wizard_state_manager),
):
    """
    Complete the registration.

    The draft is reset to an empty first step afterwards even when the
    roster write failed; ``success`` tells the two outcomes apart.
    """
    wizard = _load_wizard(manager, wizard_id)
    result = wizard.submit()
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Select at least one shift to complete registration",
        )

    _save_wizard(manager, wizard_id, wizard)
    return {
        "success": result.saved,
        "title": result.title,
        "message": result.message,
        "volunteer": result.volunteer.to_storage(),
        "wizard": _wizard_response(wizard_id, wizard),
    }
