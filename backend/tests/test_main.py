from deal_tracker import main
from deal_tracker.core.config import Settings


def test_run_starts_uvicorn_with_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main.run(Settings(HOST="127.0.0.1", PORT=9001, LOG_LEVEL="DEBUG"))

    assert calls == [("deal_tracker.main:app", {"host": "127.0.0.1", "port": 9001, "log_level": "debug"})]


def test_root(client):
    assert client.get("/").json() == {"message": "Property Deal Tracker API", "version": "1.0.0"}
