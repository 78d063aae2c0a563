from __future__ import annotations

import logging
from decimal import Decimal

from flask import Flask, flash, redirect, render_template, request, url_for

from ..attachments.model import UploadedFile
from ..common.responses import attachment_error_response, invalid_intent_response, missing_fields_response
from ..container import Container
from ..core.exceptions import AttachmentStoreError, MissingFieldsError, ValidationError
from ..views.query import ViewQuery, compose
from .model import EmployeeInput

logger = logging.getLogger(__name__)

SORT_FIELDS = ("full_name", "email", "department", "job_title", "salary", "start_date", "date_of_birth")


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _uploads():
        return (
            UploadedFile.from_file_storage(request.files.get("photo_file")),
            UploadedFile.from_file_storage(request.files.get("doc_file")),
        )

    @app.route("/employees", endpoint="employees_list")
    def employees_list():
        query = ViewQuery.from_args(
            request.args,
            page_size=int(app.config["PAGE_SIZE"]),
            default_salary_ceiling=Decimal(str(app.config["DEFAULT_SALARY_CEILING"])),
            sort_fields=SORT_FIELDS,
        )
        employees = service.list_all()
        page = compose([e.to_row() for e in employees], query)
        return render_template(
            "employees/list.html",
            page=page,
            departments=service.list_departments(),
            sort_fields=SORT_FIELDS,
        )

    @app.route("/employees/new", methods=["GET", "POST"], endpoint="employees_new")
    def employees_new():
        if request.method == "POST":
            try:
                data = EmployeeInput.from_form(request.form)
                photo, document = _uploads()
                service.create(data, photo=photo, document=document)
                flash("Employee created.", "success")
                return redirect(url_for("employees_list"))
            except MissingFieldsError as e:
                return missing_fields_response(e)
            except ValidationError as e:
                return render_template("employees/form.html", form=request.form, errors=e.errors), 400
            except AttachmentStoreError as e:
                return attachment_error_response(e)

        return render_template("employees/form.html", form={}, errors={})

    @app.route("/employees/<int:employee_id>", methods=["GET", "POST"], endpoint="employees_detail")
    def employees_detail(employee_id: int):
        employee = service.get(employee_id)

        if request.method == "POST":
            intent = request.form.get("intent")
            if intent == "delete":
                service.delete(employee_id)
                flash("Employee deleted.", "success")
                return redirect(url_for("employees_list"))

            if intent != "update":
                return invalid_intent_response()

            try:
                data = EmployeeInput.from_form(request.form)
                photo, document = _uploads()
                service.update(employee_id, data, photo=photo, document=document)
                flash("Employee updated.", "success")
                return redirect(url_for("employees_detail", employee_id=employee_id))
            except MissingFieldsError as e:
                return missing_fields_response(e)
            except ValidationError as e:
                return (
                    render_template(
                        "employees/detail.html",
                        employee=employee,
                        form=request.form,
                        errors=e.errors,
                        editing=True,
                    ),
                    400,
                )
            except AttachmentStoreError as e:
                logger.warning("Attachment upload failed for employee %s", employee_id)
                return attachment_error_response(e)

        editing = request.args.get("edit") == "1"
        return render_template("employees/detail.html", employee=employee, form={}, errors={}, editing=editing)
