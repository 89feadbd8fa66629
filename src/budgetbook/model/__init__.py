from .entities import (
    AppState,
    Category,
    CategoryDraft,
    CategoryPatch,
    CategoryStatus,
    Goal,
    GoalDraft,
    GoalPatch,
    GoalStatus,
    PaymentMethod,
    ProfileType,
    Settings,
    SettingsPatch,
    Transaction,
    TransactionDraft,
    TransactionPatch,
    TransactionStatus,
    TransactionType,
    User,
    UserPatch,
)
from .snapshot_io import (
    SnapshotFormatError,
    dump_snapshot,
    export_filename,
    parse_snapshot,
)

__all__ = [
    # models
    "AppState",
    "Category",
    "CategoryDraft",
    "CategoryPatch",
    "CategoryStatus",
    "Goal",
    "GoalDraft",
    "GoalPatch",
    "GoalStatus",
    "PaymentMethod",
    "ProfileType",
    "Settings",
    "SettingsPatch",
    "Transaction",
    "TransactionDraft",
    "TransactionPatch",
    "TransactionStatus",
    "TransactionType",
    "User",
    "UserPatch",
    # IO helpers
    "SnapshotFormatError",
    "dump_snapshot",
    "export_filename",
    "parse_snapshot",
]
