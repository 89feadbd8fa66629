"""
Ledger entity models: transactions, categories, goals, user profile, settings.

Scope
- Pure Pydantic v2 models; no I/O (snapshot encoding lives in snapshot_io.py)
- Field names are snake_case in Python and camelCase on the wire, matching
  the persisted snapshot format
- Models are frozen and AppState holds tuples, so a snapshot reference handed
  to derivation code or the presentation layer is a read-only view

Each entity comes in three shapes:
- ``<Entity>Draft``: the fields a caller supplies when creating a record
- ``<Entity>``: a stored record, i.e. the draft plus its assigned ``id``
- ``<Entity>Patch``: every field optional, for merge-patch updates
"""
from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TransactionType(StrEnum):
    income = "income"
    expense = "expense"


class TransactionStatus(StrEnum):
    pending = "pending"
    completed = "completed"


class PaymentMethod(StrEnum):
    """Conventional payment methods for expenses. Not enforced on Transaction."""

    cash = "cash"
    debit = "debit"
    credit = "credit"
    instant_transfer = "instant-transfer"


class CategoryStatus(StrEnum):
    active = "active"
    inactive = "inactive"


class GoalStatus(StrEnum):
    in_progress = "in_progress"
    completed = "completed"


class ProfileType(StrEnum):
    individual = "individual"
    family = "family"


class LedgerModel(BaseModel):
    """Common configuration: frozen, camelCase aliases, populate by field name."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PatchModel(BaseModel):
    """Base for partial updates. Only explicitly set fields are applied."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict:
        """Fields the caller actually set, keyed by Python field name."""
        return self.model_dump(exclude_unset=True)


# ------------------------------
# Transactions
# ------------------------------


class TransactionDraft(LedgerModel):
    """A money movement as supplied by the caller, before an id is assigned.

    The amount is never negative; direction is carried by ``type``.
    """

    date: dt.date
    description: str
    category_id: str = Field(description="Category reference; dangling ids are tolerated")
    amount: float = Field(ge=0)
    type: TransactionType
    status: TransactionStatus = TransactionStatus.completed
    payment_method: Optional[str] = Field(
        default=None, description="Expense convention: cash, debit, credit or instant-transfer"
    )

    @property
    def month_key(self) -> str:
        """Month bucket (YYYY-MM) this transaction falls into."""
        return self.date.isoformat()[:7]

    @property
    def is_completed(self) -> bool:
        return self.status == TransactionStatus.completed

    @property
    def signed_amount(self) -> float:
        return self.amount if self.type == TransactionType.income else -self.amount


class Transaction(TransactionDraft):
    id: str


class TransactionPatch(PatchModel):
    date: Optional[dt.date] = None
    description: Optional[str] = None
    category_id: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    type: Optional[TransactionType] = None
    status: Optional[TransactionStatus] = None
    payment_method: Optional[str] = None


# ------------------------------
# Categories
# ------------------------------


class CategoryDraft(LedgerModel):
    """Grouping label with an optional monthly ceiling (expense categories only).

    A missing or zero ``monthly_limit`` means the category is unlimited.
    """

    name: str
    type: TransactionType
    status: CategoryStatus = CategoryStatus.active
    color: Optional[str] = Field(default=None, description="Display hint only")
    monthly_limit: Optional[float] = Field(default=None, ge=0)

    @property
    def has_limit(self) -> bool:
        return bool(self.monthly_limit) and self.monthly_limit > 0

    @property
    def is_active(self) -> bool:
        return self.status == CategoryStatus.active


class Category(CategoryDraft):
    id: str


class CategoryPatch(PatchModel):
    name: Optional[str] = None
    type: Optional[TransactionType] = None
    status: Optional[CategoryStatus] = None
    color: Optional[str] = None
    monthly_limit: Optional[float] = Field(default=None, ge=0)


# ------------------------------
# Goals
# ------------------------------


class GoalDraft(LedgerModel):
    """Savings target. ``current_value`` is adjusted by hand, not derived."""

    name: str
    target_value: float = Field(gt=0)
    current_value: float = Field(default=0.0, ge=0)
    monthly_planned_value: float = 0.0
    deadline: dt.date
    status: GoalStatus = GoalStatus.in_progress


class Goal(GoalDraft):
    id: str


class GoalPatch(PatchModel):
    name: Optional[str] = None
    target_value: Optional[float] = Field(default=None, gt=0)
    current_value: Optional[float] = Field(default=None, ge=0)
    monthly_planned_value: Optional[float] = None
    deadline: Optional[dt.date] = None
    status: Optional[GoalStatus] = None


# ------------------------------
# Singletons: user profile and settings
# ------------------------------


class User(LedgerModel):
    """Single household profile. ``base_salary`` is the planned monthly income."""

    name: str
    profile_type: ProfileType = ProfileType.individual
    currency: str = Field(default="USD", description="ISO 4217 currency code")
    base_salary: float = 0.0
    is_active: bool = True


class UserPatch(PatchModel):
    name: Optional[str] = None
    profile_type: Optional[ProfileType] = None
    currency: Optional[str] = None
    base_salary: Optional[float] = None
    is_active: Optional[bool] = None


class Settings(LedgerModel):
    start_month: int = Field(default=0, ge=0, le=11, description="Reporting start month, 0-11")
    alert_threshold: float = Field(default=80.0, ge=0, le=100, description="Utilization % that flags a category")


class SettingsPatch(PatchModel):
    start_month: Optional[int] = Field(default=None, ge=0, le=11)
    alert_threshold: Optional[float] = Field(default=None, ge=0, le=100)


# ------------------------------
# Aggregate root
# ------------------------------


class AppState(LedgerModel):
    """The whole ledger; the only unit of persistence."""

    user: User
    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    goals: tuple[Goal, ...] = ()
    settings: Settings = Field(default_factory=Settings)

    def find_transaction(self, transaction_id: str) -> Transaction | None:
        for t in self.transactions:
            if t.id == transaction_id:
                return t
        return None

    def find_category(self, category_id: str) -> Category | None:
        for c in self.categories:
            if c.id == category_id:
                return c
        return None

    def find_goal(self, goal_id: str) -> Goal | None:
        for g in self.goals:
            if g.id == goal_id:
                return g
        return None


__all__ = [
    "TransactionType",
    "TransactionStatus",
    "PaymentMethod",
    "CategoryStatus",
    "GoalStatus",
    "ProfileType",
    "TransactionDraft",
    "Transaction",
    "TransactionPatch",
    "CategoryDraft",
    "Category",
    "CategoryPatch",
    "GoalDraft",
    "Goal",
    "GoalPatch",
    "User",
    "UserPatch",
    "Settings",
    "SettingsPatch",
    "AppState",
]
