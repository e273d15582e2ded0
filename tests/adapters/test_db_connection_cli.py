"""Tests for the check_db_connection adapter."""

from src.adapters import check_db_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection

    def begin(self):
        return self.connection


def test_main_checks_connection_and_creates_table(monkeypatch):
    """The CLI should log the URL, run SELECT 1 and create the table."""
    engine = _DummyEngine("sqlite:///data/budget.db")

    class _Adapter:
        def get_budget_engine(self):
            return engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(
        check_db_connection,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(
        check_db_connection,
        "get_app_logger",
        lambda: _Logger(),
    )

    check_db_connection.main()

    assert "sqlite:///data/budget.db" in log_messages[0]
    assert "reachable" in log_messages[-1]
    assert engine.connection.executed[0] == "SELECT 1"
    assert "CREATE TABLE IF NOT EXISTS budget_store" in engine.connection.executed[1]
