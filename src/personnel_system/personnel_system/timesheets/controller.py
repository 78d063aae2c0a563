from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.responses import invalid_intent_response, missing_fields_response
from ..container import Container
from ..core.exceptions import MissingFieldsError, ValidationError
from ..views.calendar import to_calendar_events
from ..views.query import ViewQuery, compose
from .model import TimesheetInput

SORT_FIELDS = ("full_name", "start_time", "end_time")
VIEW_MODES = ("table", "calendar")


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service
    employees = container.employee_service

    def _filtered(employee_name: str):
        timesheets = service.list_with_employee()
        if employee_name:
            timesheets = [t for t in timesheets if t.employee_name == employee_name]
        return timesheets

    @app.route("/timesheets", methods=["GET", "POST"], endpoint="timesheets_list")
    def timesheets_list():
        if request.method == "POST":
            intent = request.form.get("intent")
            timesheet_id = request.form.get("id", 0, type=int)
            if intent == "delete":
                service.delete(timesheet_id)
                flash("Timesheet deleted.", "success")
                return redirect(url_for("timesheets_list"))
            if intent != "edit":
                return invalid_intent_response()
            try:
                service.update(timesheet_id, TimesheetInput.from_form(request.form))
                flash("Timesheet updated.", "success")
            except ValidationError as e:
                flash(e.message, "danger")
            return redirect(url_for("timesheets_list"))

        view = request.args.get("view", "table")
        if view not in VIEW_MODES:
            view = "table"

        query = ViewQuery.from_args(request.args, page_size=int(app.config["PAGE_SIZE"]), sort_fields=SORT_FIELDS)
        timesheets = service.list_with_employee()
        page = compose([t.to_row() for t in timesheets], query)
        employee_names = sorted({t.employee_name for t in timesheets})

        return render_template(
            "timesheets/list.html",
            page=page,
            view=view,
            employee_names=employee_names,
            events=to_calendar_events(_filtered(query.employee_name)) if view == "calendar" else [],
            sort_fields=SORT_FIELDS,
        )

    @app.route("/timesheets/events", endpoint="timesheets_events")
    def timesheets_events():
        employee_name = (request.args.get("employee") or "").strip()
        return jsonify(to_calendar_events(_filtered(employee_name)))

    @app.route("/timesheets/new", methods=["GET", "POST"], endpoint="timesheets_new")
    def timesheets_new():
        if request.method == "POST":
            try:
                service.create(TimesheetInput.from_form(request.form))
                flash("Timesheet created.", "success")
                return redirect(url_for("timesheets_list"))
            except MissingFieldsError as e:
                return missing_fields_response(e)
            except ValidationError as e:
                return (
                    render_template(
                        "timesheets/form.html",
                        employees=employees.list_choices(),
                        form=request.form,
                        errors=e.errors,
                    ),
                    400,
                )

        return render_template("timesheets/form.html", employees=employees.list_choices(), form={}, errors={})

    @app.route("/timesheets/<int:timesheet_id>", methods=["GET", "POST"], endpoint="timesheets_detail")
    def timesheets_detail(timesheet_id: int):
        timesheet = service.get(timesheet_id)

        if request.method == "POST":
            intent = request.form.get("intent")
            if intent == "delete":
                service.delete(timesheet_id)
                flash("Timesheet deleted.", "success")
                return redirect(url_for("timesheets_list"))

            if intent != "update":
                return invalid_intent_response()

            try:
                service.update(timesheet_id, TimesheetInput.from_form(request.form))
                flash("Timesheet updated.", "success")
                return redirect(url_for("timesheets_detail", timesheet_id=timesheet_id))
            except MissingFieldsError as e:
                return missing_fields_response(e)
            except ValidationError as e:
                return (
                    render_template(
                        "timesheets/detail.html",
                        timesheet=timesheet.to_row(),
                        employees=employees.list_choices(),
                        form=request.form,
                        errors=e.errors,
                        editing=True,
                    ),
                    400,
                )

        return render_template(
            "timesheets/detail.html",
            timesheet=timesheet.to_row(),
            employees=employees.list_choices(),
            form={},
            errors={},
            editing=request.args.get("edit") == "1",
        )
