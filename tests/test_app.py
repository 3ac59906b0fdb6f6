"""Tests for the HTTP API."""

from datenotes import create_app


def test_app_factory_exists():
    """Test that the app factory function exists."""
    assert callable(create_app)


def test_root_route(app):
    response = app.test_client().get("/calendar/root")
    assert response.status_code == 200
    assert response.json["title"] == "Calendar"


def test_day_route(app):
    response = app.test_client().get("/calendar/days/2024-03-15")
    assert response.status_code == 200
    assert response.json["title"] == "15 - Friday"
    assert {"type": "label", "name": "dateNote", "value": "2024-03-15"}.items() <= (
        response.json["attributes"][0].items()
    )


def test_day_route_is_idempotent(app):
    client = app.test_client()
    first = client.get("/calendar/days/2024-03-15").json
    second = client.get("/calendar/days/2024-03-15").json
    assert first["note_id"] == second["note_id"]


def test_year_and_month_routes(app):
    client = app.test_client()
    assert client.get("/calendar/years/2024-03-15").json["title"] == "2024"
    assert client.get("/calendar/months/2024-03-15").json["title"] == "03 - March"


def test_week_route_with_start_of_week(app, make_calendar_root):
    make_calendar_root(calendarType="weekly")
    client = app.test_client()
    response = client.get("/calendar/weeks/2024-03-15?startOfTheWeek=sunday")
    assert response.status_code == 200
    assert response.json["title"] == "WW10"


def test_today_route(app):
    response = app.test_client().get("/calendar/today")
    assert response.status_code == 200
    assert response.json["title"] == "15 - Friday"


def test_invalid_date_returns_400(app):
    response = app.test_client().get("/calendar/days/not-a-date")
    assert response.status_code == 400
    assert response.json["status"] == "error"


def test_invalid_start_of_week_returns_400(app, make_calendar_root):
    make_calendar_root(calendarType="weekly")
    response = app.test_client().get("/calendar/weeks/2024-03-15?startOfTheWeek=friday")
    assert response.status_code == 400
    assert "friday" in response.json["message"]
