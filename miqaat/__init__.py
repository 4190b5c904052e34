from flask import Flask, Response, jsonify, request

from .calendar import Calendar
from .config import CalendarConfig, WeekStart
from .exceptions import EntityNotFoundError, StorageError, ValidationError
from .miqaat_query import MiqaatQuery
from .occurrences import year_occurrences
from .output.ics_writer import ICSWriter
from .selection import month_keys
from .storage import daily_dua_repository, miqaat_repository


def _int_arg(name: str) -> int | None:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Query parameter '{name}' must be an integer")


def _bool_arg(name: str) -> bool | None:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValidationError(f"Query parameter '{name}' must be 'true' or 'false'")


def _week_start_arg(default: WeekStart) -> WeekStart:
    value = request.args.get("week_start")
    if not value:
        return default
    try:
        return WeekStart(value.lower())
    except ValueError:
        raise ValidationError("Query parameter 'week_start' must be 'sunday' or 'monday'")


def calendar_payload(calendar: Calendar) -> dict:
    """JSON view of a calendar month."""
    return {
        "year": calendar.year,
        "month": calendar.month,
        "month_name": calendar.month_name,
        "short_month_name": calendar.short_month_name,
        "gregorian_label": calendar.gregorian_label,
        "weekdays": calendar.weekday_names,
        "weeks": [[day.to_dict() for day in week] for week in calendar.weeks()],
    }


def create_app(config: CalendarConfig | None = None):
    app = Flask(__name__)
    config = config or CalendarConfig.from_env()
    miqaats = miqaat_repository(config)
    daily_duas = daily_dua_repository(config)

    def build_calendar(year: int | None, month: int | None) -> Calendar:
        return Calendar(
            year=year,
            month=month,
            miqaats=miqaats.list(),
            daily_duas=daily_duas.list(),
            week_start=_week_start_arg(config.week_start),
            min_year=config.min_year,
            max_year=config.max_year,
        )

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return jsonify({"status": "error", "message": str(error)}), 400

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(error):
        return jsonify({"status": "error", "message": str(error)}), 404

    @app.errorhandler(StorageError)
    def handle_storage_error(error):
        app.logger.error(str(error))
        return jsonify({"status": "error", "message": "Entity store is unreadable"}), 500

    @app.route("/calendar", methods=["GET"])
    def get_calendar():
        """Month grid; missing year/month default to today, bad ones are clamped."""
        calendar = build_calendar(_int_arg("year"), _int_arg("month"))
        return jsonify(calendar_payload(calendar))

    @app.route("/calendar/today", methods=["GET"])
    def get_today():
        return jsonify(calendar_payload(build_calendar(None, None)))

    @app.route("/calendar/<int:year>.ics", methods=["GET"])
    def get_year_ics(year: int):
        """Serve a Hijri year's miqaats as an ICS file."""
        if not config.min_year <= year <= config.max_year:
            raise ValidationError(
                f"Year must be between {config.min_year} and {config.max_year}"
            )
        occurrences = year_occurrences(year, miqaats.list())
        content = ICSWriter().to_ical(occurrences, f"Miqaats {year}H")
        return Response(
            content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": f"attachment; filename=miqaats-{year}.ics"},
        )

    @app.route("/selection/month", methods=["GET"])
    def get_month_selection():
        calendar = build_calendar(_int_arg("year"), _int_arg("month"))
        return jsonify({"keys": sorted(month_keys(calendar))})

    @app.route("/miqaats", methods=["GET"])
    def list_miqaats():
        """Search miqaats with pagination."""
        query = MiqaatQuery(miqaats.list())
        results = query.search(
            name=request.args.get("name"),
            miqaat_type=request.args.get("type"),
            date=_int_arg("date"),
            month=_int_arg("month"),
            important=_bool_arg("important"),
        )
        page_number = _int_arg("page")
        page_size = _int_arg("page_size")
        page = query.paginate(
            page=1 if page_number is None else page_number,
            page_size=config.page_size if page_size is None else page_size,
            miqaats=results,
        )
        return jsonify(page.model_dump(mode="json"))

    @app.route("/miqaats/<int:miqaat_id>", methods=["GET"])
    def get_miqaat(miqaat_id: int):
        return jsonify(miqaats.get(miqaat_id).model_dump(mode="json"))

    return app
