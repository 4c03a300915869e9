"""Canonical logging field names for cross-component consistency.

These constants define a stable key set for structured logs and context
propagation. Formatters group the selection and dispatch fields so a log line
always shows where in the cascade it was emitted.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"
EXCEPTION = "exception"

# Notification dispatch fields.
NOTIFICATION = "notification"
HANDLER_COUNT = "handler_count"
DISPATCH_DEPTH = "dispatch_depth"
DEFERRED_ROUND = "deferred_round"
PENDING_TASKS = "pending_tasks"

# User action fields.
COMPONENT_ID = "component_id"
ACTION_NAME = "action_name"
USER_ACTION_INVOCATION_EVENT = "user_action_invocation"
USER_ACTION_COMPLETION_EVENT = "user_action_completion"
SUCCESS = "success"
DURATION_MS = "duration_ms"
ERRORS = "errors"

# Selection fields.
SERVICE_NAME = "service_name"
VERSION = "version"
METHOD_NAME = "method_name"
AUTH_MODE = "auth_mode"

# Common process-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

# Groups rendered together by the formatters, in display order.
SELECTION = "selection"
SELECTION_FIELDS = (SERVICE_NAME, VERSION, METHOD_NAME, AUTH_MODE)
DISPATCH = "dispatch"
DISPATCH_FIELDS = (
    NOTIFICATION,
    HANDLER_COUNT,
    DISPATCH_DEPTH,
    DEFERRED_ROUND,
    PENDING_TASKS,
)
