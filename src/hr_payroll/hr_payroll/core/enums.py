from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance labels as stored in attendance_records.status."""

    PRESENT = "Present"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"


class LeaveType(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"
    SICK = "Sick"


class LeaveStatus(str, Enum):
    """Approval state of a leave request (owned by the leave workflow)."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PayrollStatus(str, Enum):
    """Lifecycle of a payroll record: Pending -> Processing -> Paid."""

    PENDING = "Pending"
    PROCESSING = "Processing"
    PAID = "Paid"
