"""Services for FoodBridge"""

from foodbridge.services.admin_login_log import AdminLoginLog
from foodbridge.services.approval_workflow import ApprovalWorkflow
from foodbridge.services.export_service import VolunteerExporter, export_filename
from foodbridge.services.record_store import (
    ADMIN_LOGINS_TABLE,
    VOLUNTEERS_TABLE,
    RecordStore,
)
from foodbridge.services.signup_wizard import (
    SignupWizard,
    SubmissionResult,
    WizardStep,
)
from foodbridge.services.volunteer_repository import VolunteerRepository
from foodbridge.services.wizard_state_manager import WizardStateManager

__all__ = [
    "ADMIN_LOGINS_TABLE",
    "VOLUNTEERS_TABLE",
    "AdminLoginLog",
    "ApprovalWorkflow",
    "RecordStore",
    "SignupWizard",
    "SubmissionResult",
    "VolunteerExporter",
    "VolunteerRepository",
    "WizardStateManager",
    "WizardStep",
    "export_filename",
]
