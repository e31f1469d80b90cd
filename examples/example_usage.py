"""Example: use the service layer without Flask.

Goal: show that controllers are a thin layer; the business rules live in services.
"""

import tempfile
from datetime import date

from attendance_register.container import build_container
from attendance_register.core.enums import AttendanceStatus, Gender
from attendance_register.storage.json_file_store import JsonFileStore
from attendance_register.students.model import StudentDraft


def main():
    container = build_container(store=JsonFileStore(tempfile.mkdtemp()))

    alice = container.student_service.add(
        StudentDraft(
            name="Alice",
            father_name="Bob",
            date_of_birth=date(2015, 6, 1),
            gender=Gender.FEMALE,
            father_mobile="9876543210",
            mother_mobile="9876543211",
        )
    )
    container.attendance_service.set_for_date(date.today(), {alice.id: AttendanceStatus.PRESENT})

    for month in container.dashboard_service.monthly_stats():
        print(f"{month.label} {month.year}: {month.average_attendance}% of {month.total_days} days")


if __name__ == "__main__":
    main()
