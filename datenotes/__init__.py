from flask import Flask, jsonify, request

from .config import AppConfig
from .exceptions import (
    ConfigurationError,
    DateNoteError,
    InvalidDateError,
    NoteNotFoundError,
    UnknownPatternError,
)
from .models.calendar_config import WeekNoteOptions
from .service import DateNoteService
from .storage.json_store import JsonNoteStore

CLIENT_ERRORS = (ConfigurationError, InvalidDateError, UnknownPatternError)


def create_service(config: AppConfig | None = None) -> DateNoteService:
    """Build a service over the JSON store named by the configuration."""
    if config is None:
        config = AppConfig.from_env()
    return DateNoteService(JsonNoteStore(config.store_path), config.session())


def create_app(service: DateNoteService | None = None):
    app = Flask(__name__)
    app.config["DATE_NOTE_SERVICE"] = service

    def get_service() -> DateNoteService:
        if app.config["DATE_NOTE_SERVICE"] is None:
            app.config["DATE_NOTE_SERVICE"] = create_service()
        return app.config["DATE_NOTE_SERVICE"]

    @app.errorhandler(DateNoteError)
    def handle_date_note_error(error):
        if isinstance(error, CLIENT_ERRORS):
            status = 400
        elif isinstance(error, NoteNotFoundError):
            status = 404
        else:
            status = 500
        return jsonify({"status": "error", "message": str(error)}), status

    @app.route("/calendar/root", methods=["GET"])
    def root_note():
        return jsonify(get_service().get_root_calendar_note().model_dump(mode="json"))

    @app.route("/calendar/years/<date>", methods=["GET"])
    def year_note(date):
        return jsonify(get_service().get_year_note(date).model_dump(mode="json"))

    @app.route("/calendar/months/<date>", methods=["GET"])
    def month_note(date):
        return jsonify(get_service().get_month_note(date).model_dump(mode="json"))

    @app.route("/calendar/weeks/<date>", methods=["GET"])
    def week_note(date):
        options = WeekNoteOptions(start_of_the_week=request.args.get("startOfTheWeek"))
        note = get_service().get_week_note(date, options)
        return jsonify(note.model_dump(mode="json"))

    @app.route("/calendar/days/<date>", methods=["GET"])
    def day_note(date):
        return jsonify(get_service().get_day_note(date).model_dump(mode="json"))

    @app.route("/calendar/today", methods=["GET"])
    def today_note():
        return jsonify(get_service().get_today_note().model_dump(mode="json"))

    return app
