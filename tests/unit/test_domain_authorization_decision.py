"""Unit tests for the authorization decision function.

Tests cover:
- ADMIN bypass (every resource kind and action, known or not)
- Exhaustive role x resource x verb grid against the expected matrix
- Ownership and assignment scoping
- Fail-closed handling of unknown roles, resource kinds and actions
- Purity (same input, same verdict)
"""

import pytest

from taskboard.domain.authorization import is_admin, is_allowed
from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.value_objects import AccessQuery
from tests.utils.permission_matrix import EXPECTED_MATRIX, VERBS

NON_ADMIN_ROLES = [role for role in UserRole if role is not UserRole.ADMIN]
PREFILTERED = {"team", "all", "project"}


def _query(role, resource, action, *, user_id="u1", owner_id=None, assignee_id=None):
    return AccessQuery(
        role=role,
        user_id=user_id,
        resource=resource,
        action=action,
        owner_id=owner_id,
        assignee_id=assignee_id,
    )


def _expected_grants(resource: str, role: str, verb: str) -> list[tuple[str, str]]:
    """(verb, qualifier) pairs from the expected matrix for one verb."""
    pairs = [token.partition("_") for token in EXPECTED_MATRIX[resource][role]]
    return [(v, scope) for v, _, scope in pairs if v == verb]


# =============================================================================
# ADMIN bypass
# =============================================================================


@pytest.mark.unit
class TestAdminBypass:
    """ADMIN is allowed everything, unconditionally."""

    @pytest.mark.parametrize("resource", [*ResourceKind.values(), "milestones", "epics"])
    @pytest.mark.parametrize("action", [*VERBS, "approve", "delete_own", "read_all"])
    def test_admin_allowed_everything(self, resource: str, action: str) -> None:
        assert is_allowed(_query(UserRole.ADMIN, resource, action)) is True

    def test_admin_ignores_ownership_facts(self) -> None:
        query = _query(
            "ADMIN", "time_entries", "delete_own", owner_id="u2", assignee_id="u3"
        )
        assert is_allowed(query) is True

    def test_is_admin_is_exact(self) -> None:
        assert is_admin(UserRole.ADMIN) is True
        assert is_admin("ADMIN") is True
        assert is_admin("admin") is False
        assert is_admin(UserRole.PROJECT_MANAGER) is False


# =============================================================================
# Exhaustive grid
# =============================================================================


@pytest.mark.unit
class TestPermissionGrid:
    """Every non-admin (role, resource, verb) cell behaves per the matrix."""

    @pytest.mark.parametrize("role", NON_ADMIN_ROLES)
    @pytest.mark.parametrize("resource", ResourceKind.values())
    @pytest.mark.parametrize("verb", VERBS)
    def test_without_instance_facts(self, role: UserRole, resource: str, verb: str) -> None:
        """No facts: only unscoped and pre-filtered grants pass."""
        grants = _expected_grants(resource, role.value, verb)
        expected = any(scope == "" or scope in PREFILTERED for _, scope in grants)

        assert is_allowed(_query(role, resource, verb)) is expected

    @pytest.mark.parametrize("role", NON_ADMIN_ROLES)
    @pytest.mark.parametrize("resource", ResourceKind.values())
    @pytest.mark.parametrize("verb", VERBS)
    def test_with_matching_facts(self, role: UserRole, resource: str, verb: str) -> None:
        """Actor owns and is assigned: any grant of the verb passes."""
        expected = bool(_expected_grants(resource, role.value, verb))
        query = _query(role, resource, verb, owner_id="u1", assignee_id="u1")

        assert is_allowed(query) is expected

    @pytest.mark.parametrize("role", NON_ADMIN_ROLES)
    @pytest.mark.parametrize("resource", ResourceKind.values())
    @pytest.mark.parametrize("verb", VERBS)
    def test_with_foreign_facts(self, role: UserRole, resource: str, verb: str) -> None:
        """Someone else owns and is assigned: owner/assignee grants fail."""
        grants = _expected_grants(resource, role.value, verb)
        expected = any(scope == "" or scope in PREFILTERED for _, scope in grants)
        query = _query(role, resource, verb, owner_id="u2", assignee_id="u2")

        assert is_allowed(query) is expected

    @pytest.mark.parametrize("verb", VERBS)
    def test_client_denied_all_settings_actions(self, verb: str) -> None:
        query = _query(UserRole.CLIENT, "settings", verb, owner_id="u1", assignee_id="u1")
        assert is_allowed(query) is False


# =============================================================================
# Scoped scenarios
# =============================================================================


@pytest.mark.unit
class TestScopedDecisions:
    """Ownership and assignment scenarios."""

    def test_employee_updates_assigned_issue(self) -> None:
        query = _query("EMPLOYEE", "issues", "update_assigned", assignee_id="u1")
        assert is_allowed(query) is True

    def test_employee_cannot_update_unassigned_issue(self) -> None:
        query = _query("EMPLOYEE", "issues", "update_assigned", assignee_id="u2")
        assert is_allowed(query) is False

    def test_employee_update_without_assignee_fact_denied(self) -> None:
        query = _query("EMPLOYEE", "issues", "update_assigned", owner_id="u1")
        assert is_allowed(query) is False

    def test_employee_deletes_own_time_entry(self) -> None:
        query = _query("EMPLOYEE", "time_entries", "delete_own", owner_id="u1")
        assert is_allowed(query) is True

    def test_employee_cannot_delete_other_employees_time_entry(self) -> None:
        query = _query(
            "EMPLOYEE", "time_entries", "delete_own", user_id="u1", owner_id="u7"
        )
        assert is_allowed(query) is False

    def test_employee_reads_own_user_record(self) -> None:
        assert is_allowed(_query("EMPLOYEE", "users", "read_self", owner_id="u1")) is True
        assert is_allowed(_query("EMPLOYEE", "users", "read_self", owner_id="u2")) is False

    def test_client_cannot_update_issue_reported_by_someone_else(self) -> None:
        query = _query("CLIENT", "issues", "update_own", user_id="u1", owner_id="u2")
        assert is_allowed(query) is False

    def test_client_updates_own_issue(self) -> None:
        query = _query("CLIENT", "issues", "update_own", user_id="u1", owner_id="u1")
        assert is_allowed(query) is True

    def test_client_reads_assigned_project(self) -> None:
        assert is_allowed(_query("CLIENT", "projects", "read_assigned", assignee_id="u1"))
        assert not is_allowed(_query("CLIENT", "projects", "read_assigned"))

    def test_grant_scope_decides_not_requested_scope(self) -> None:
        """The requested qualifier is ignored; the granted one is applied."""
        assigned = _query("EMPLOYEE", "issues", "update", assignee_id="u1")
        owned_only = _query("EMPLOYEE", "issues", "update_own", owner_id="u1")

        assert is_allowed(assigned) is True
        assert is_allowed(owned_only) is False

    def test_unscoped_grant_dominates(self) -> None:
        query = _query("SCRUM_MASTER", "issues", "update_assigned", assignee_id="u2")
        assert is_allowed(query) is True


# =============================================================================
# Broad and unscoped scenarios
# =============================================================================


@pytest.mark.unit
class TestBroadDecisions:
    def test_scrum_master_starts_sprint_regardless_of_facts(self) -> None:
        for owner_id, assignee_id in [(None, None), ("u2", "u3"), ("u1", "u1")]:
            query = _query(
                UserRole.SCRUM_MASTER,
                "sprints",
                "start",
                owner_id=owner_id,
                assignee_id=assignee_id,
            )
            assert is_allowed(query) is True

    def test_project_manager_reads_all_reports(self) -> None:
        assert is_allowed(_query(UserRole.PROJECT_MANAGER, "reports", "read_all")) is True

    def test_managers_read_team_time_entries(self) -> None:
        for role in (UserRole.PROJECT_MANAGER, UserRole.SCRUM_MASTER):
            assert is_allowed(_query(role, "time_entries", "read_team")) is True
            assert is_allowed(_query(role, "time_entries", "update")) is False

    def test_client_reads_project_reports(self) -> None:
        assert is_allowed(_query(UserRole.CLIENT, "reports", "read_project")) is True


# =============================================================================
# Fail-closed inputs
# =============================================================================


@pytest.mark.unit
class TestFailClosed:
    """Unrecognized inputs deny without raising."""

    def test_unknown_resource_kind(self) -> None:
        assert is_allowed(_query("PROJECT_MANAGER", "milestones", "read")) is False

    def test_unknown_role(self) -> None:
        assert is_allowed(_query("SUPERUSER", "issues", "read")) is False

    def test_lowercase_admin_is_not_admin(self) -> None:
        assert is_allowed(_query("admin", "settings", "update")) is False

    @pytest.mark.parametrize("action", ["approve", "read_everything", "READ"])
    def test_unknown_action(self, action: str) -> None:
        assert is_allowed(_query("PROJECT_MANAGER", "issues", action)) is False


@pytest.mark.unit
class TestPurity:
    def test_identical_queries_identical_verdicts(self) -> None:
        query = _query("EMPLOYEE", "comments", "update_own", owner_id="u1")
        assert is_allowed(query) is is_allowed(query) is True

        denied = _query("EMPLOYEE", "comments", "update_own", owner_id="u2")
        assert is_allowed(denied) is is_allowed(denied) is False
