"""Example: drive the payroll service directly (no transport layer).

Run ``scripts/init_db.py`` and ``scripts/seed_db.py`` first.
"""

from hr_payroll.main import create_container


def main():
    container = create_container()
    service = container.payroll_service

    preview = service.preview(1, "october", 2025)
    print(preview.period.key, preview.details.to_json_dict())

    record = service.commit(1, "October", 2025)
    print(record.payroll_id, record.status.value, record.amount)

    print(service.summarize(service.list_records()))


if __name__ == "__main__":
    main()
