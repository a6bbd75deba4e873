"""Expected authorization facts shared by test modules."""

# Expected permission matrix, written out independently of the engine so the
# table under test is checked against a second statement of the same facts.
EXPECTED_MATRIX: dict[str, dict[str, set[str]]] = {
    "users": {
        "ADMIN": {"create", "read", "update", "delete"},
        "PROJECT_MANAGER": {"create", "read", "update", "delete"},
        "SCRUM_MASTER": {"read"},
        "EMPLOYEE": {"read_self"},
        "CLIENT": set(),
    },
    "projects": {
        "ADMIN": {"create", "read", "update", "delete"},
        "PROJECT_MANAGER": {"create", "read", "update", "delete"},
        "SCRUM_MASTER": {"read", "update"},
        "EMPLOYEE": {"read"},
        "CLIENT": {"read_assigned"},
    },
    "sprints": {
        "ADMIN": {"create", "read", "update", "delete", "start", "complete"},
        "PROJECT_MANAGER": {"create", "read", "update", "delete", "start", "complete"},
        "SCRUM_MASTER": {"create", "read", "update", "delete", "start", "complete"},
        "EMPLOYEE": {"read"},
        "CLIENT": {"read"},
    },
    "issues": {
        "ADMIN": {"create", "read", "update", "delete"},
        "PROJECT_MANAGER": {"create", "read", "update", "delete"},
        "SCRUM_MASTER": {"create", "read", "update", "delete"},
        "EMPLOYEE": {"create", "read", "update_assigned", "delete_own"},
        "CLIENT": {"create", "read", "update_own"},
    },
    "comments": {
        "ADMIN": {"create", "read", "update", "delete"},
        "PROJECT_MANAGER": {"create", "read", "update", "delete"},
        "SCRUM_MASTER": {"create", "read", "update", "delete"},
        "EMPLOYEE": {"create", "read", "update_own", "delete_own"},
        "CLIENT": {"create", "read"},
    },
    "time_entries": {
        "ADMIN": {"create", "read", "update", "delete"},
        "PROJECT_MANAGER": {"read_team"},
        "SCRUM_MASTER": {"read_team"},
        "EMPLOYEE": {"create", "read_own", "update_own", "delete_own"},
        "CLIENT": set(),
    },
    "reports": {
        "ADMIN": {"read_all"},
        "PROJECT_MANAGER": {"read_all"},
        "SCRUM_MASTER": {"read_team"},
        "EMPLOYEE": {"read_own"},
        "CLIENT": {"read_project"},
    },
    "settings": {
        "ADMIN": {"read", "update"},
        "PROJECT_MANAGER": {"read", "update"},
        "SCRUM_MASTER": set(),
        "EMPLOYEE": set(),
        "CLIENT": set(),
    },
}

VERBS = ("create", "read", "update", "delete", "start", "complete")
