"""Role and permission identifiers.

Both enumerations are closed: roles and permissions are code, not data.
Adding one requires a code change and a redeploy.
"""

from enum import Enum


class Role(str, Enum):
    """Staff category assigned to a user. Exactly one per user."""

    PRACTICE_MANAGER = "PRACTICE_MANAGER"
    VETERINARIAN = "VETERINARIAN"
    VET_TECHNICIAN = "VET_TECHNICIAN"
    VET_ASSISTANT = "VET_ASSISTANT"
    RECEPTIONIST = "RECEPTIONIST"
    PET_OWNER = "PET_OWNER"

    def __str__(self) -> str:
        return self.value


class Permission(str, Enum):
    """A single action a role may be allowed to perform."""

    # Practice management
    MANAGE_PRACTICE_SETTINGS = "manage_practice_settings"
    VIEW_PRACTICE_STATISTICS = "view_practice_statistics"

    # Team management
    INVITE_TEAM_MEMBERS = "invite_team_members"
    MANAGE_TEAM_ROLES = "manage_team_roles"
    VIEW_TEAM_MEMBERS = "view_team_members"

    # Monitoring plans
    CREATE_MONITORING_PLAN = "create_monitoring_plan"
    EDIT_MONITORING_PLAN = "edit_monitoring_plan"
    VIEW_MONITORING_PLAN = "view_monitoring_plan"
    DELETE_MONITORING_PLAN = "delete_monitoring_plan"
    SHARE_MONITORING_PLAN = "share_monitoring_plan"

    # Patient management
    CREATE_PATIENT = "create_patient"
    EDIT_PATIENT = "edit_patient"
    VIEW_PATIENT = "view_patient"
    DELETE_PATIENT = "delete_patient"

    # Symptoms and observations
    CREATE_SYMPTOM = "create_symptom"
    EDIT_SYMPTOM = "edit_symptom"
    VIEW_SYMPTOM = "view_symptom"
    DELETE_SYMPTOM = "delete_symptom"
    RECORD_OBSERVATION = "record_observation"

    # Reporting
    VIEW_REPORTS = "view_reports"
    EXPORT_REPORTS = "export_reports"

    # Subscriptions
    MANAGE_SUBSCRIPTIONS = "manage_subscriptions"

    def __str__(self) -> str:
        return self.value
