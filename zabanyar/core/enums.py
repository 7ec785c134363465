"""Core enums used across modules."""

from enum import StrEnum


class RoleEnum(StrEnum):
    """System roles."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class TeacherStatusEnum(StrEnum):
    """Teacher profile review status."""

    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    INACTIVE = "inactive"
    REJECTED = "rejected"


class StudentStatusEnum(StrEnum):
    """Student account status."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class BookingStatusEnum(StrEnum):
    """Booking lifecycle status."""

    PENDING = "pending"
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ClassStatusEnum(StrEnum):
    """Class session status."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatusEnum(StrEnum):
    """Payment processing status."""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class WalletTransactionTypeEnum(StrEnum):
    """Wallet ledger entry type."""

    COMMISSION = "commission"
    WITHDRAWAL = "withdrawal"


class NotificationTypeEnum(StrEnum):
    """Notification severity shown in dashboards."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ReadingStatusEnum(StrEnum):
    """Article reading progress status."""

    NOT_STARTED = "not_started"
    READING = "reading"
    COMPLETED = "completed"


class WeekdayEnum(StrEnum):
    """Week days in the order used by the schedule grid."""

    SATURDAY = "saturday"
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
