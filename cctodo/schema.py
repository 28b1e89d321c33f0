"""Names of the to-do table and its columns."""

TABLE = "TodoTable"

KEY_ID = "ID"
KEY_MAIN_TASK = "MainTask"
KEY_DESCRIPTIONS = "Descriptions"
KEY_PRIORITY = "Priority"
KEY_BEGIN_DATE = "BeginDate"
KEY_END_DATE = "EndDate"
KEY_BELONGING_GROUP = "BelongingGroup"
KEY_PARENT_ID = "Parent"
KEY_IS_FINISHED = "isFinished"

AVAILABLE_KEYS = (
    KEY_ID,
    KEY_MAIN_TASK,
    KEY_DESCRIPTIONS,
    KEY_PRIORITY,
    KEY_BEGIN_DATE,
    KEY_END_DATE,
    KEY_BELONGING_GROUP,
    KEY_PARENT_ID,
    KEY_IS_FINISHED,
)


def is_key(key: str) -> bool:
    """Tell whether ``key`` names a column of the to-do table."""
    return key in AVAILABLE_KEYS