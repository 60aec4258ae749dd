from hr_payroll.container import build_container
from hr_payroll.main import create_container
from hr_payroll.payroll.service import PayrollService


def test_build_container_wires_one_connection_into_every_repository():
    container = build_container(
        db_config={"host": "db", "port": "3307", "user": "hr", "password": "secret", "database": "payroll"}
    )

    assert isinstance(container.payroll_service, PayrollService)
    assert container.conn.config.port == 3307
    assert container.conn.config.database == "payroll"
    for repo in (container.employees_repo, container.attendance_repo, container.leaves_repo, container.payroll_repo):
        assert repo._conn_factory is container.conn


def test_containers_do_not_share_connections():
    a = build_container(db_config={"database": "a"})
    b = build_container(db_config={"database": "b"})

    assert a.conn is not b.conn


def test_create_container_uses_app_env_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")
    monkeypatch.setenv("DB_NAME", "hr_payroll_ci")

    container = create_container()

    assert container.conn.config.database == "hr_payroll_ci"
