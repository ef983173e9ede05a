from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_date, format_time
from ..core.constants import DISPLAY_DATE_FORMAT, DISPLAY_TIME_FORMAT
from ..core.exceptions import WorkTimeValidationError
from ..container import Container
from .model import WorkTimeDataModel
from .validation import FIELDS, bind_work_time

logger = logging.getLogger(__name__)


def _form_values(data: Optional[WorkTimeDataModel]) -> Dict[str, str]:
    if data is None:
        return {f: "" for f in FIELDS}
    return {
        "task_id": str(data.task_id or ""),
        "employee_id": str(data.employee_id or ""),
        "work_date": format_date(data.work_date) or "",
        "start_time": format_time(data.start_time) or "",
        "stop_time": format_time(data.stop_time) or "",
    }


def _raw_values(form: Mapping[str, str]) -> Dict[str, str]:
    return {f: (form.get(f) or "").strip() for f in FIELDS}


def register(app: Flask, container: Container) -> None:
    service = container.work_time_service

    @app.template_filter("display_date")
    def display_date(value):
        return format_date(value, DISPLAY_DATE_FORMAT) or ""

    @app.template_filter("display_time")
    def display_time(value):
        return format_time(value, DISPLAY_TIME_FORMAT) or ""

    def _lookups():
        employees = {e.employee_id: e for e in container.employees_repo.list_all()}
        tasks = {t.task_id: t for t in container.tasks_repo.list_all()}
        return employees, tasks

    def _render_form(*, title: str, action: str, values: Dict[str, str], errors: Dict[str, str], status: int = 200):
        employees, tasks = _lookups()
        return (
            render_template(
                "worktime/form.html",
                title=title,
                action=action,
                values=values,
                errors=errors,
                employees=list(employees.values()),
                tasks=list(tasks.values()),
                active_page="worktime",
            ),
            status,
        )

    def _not_found():
        return render_template("404.html", message="Work time entry not found"), 404

    @app.route("/worktime", endpoint="worktime_index")
    def worktime_index():
        employees, tasks = _lookups()
        entries = service.list_all()
        return render_template(
            "worktime/index.html",
            entries=entries,
            employees=employees,
            tasks=tasks,
            active_page="worktime",
        )

    @app.route("/worktime/details/<int:work_time_id>", endpoint="worktime_details")
    def worktime_details(work_time_id: int):
        found, data = service.try_get(work_time_id)
        if not found:
            return _not_found()
        employees, tasks = _lookups()
        return render_template(
            "worktime/details.html",
            entry=data,
            employee=employees.get(data.employee_id),
            task=tasks.get(data.task_id),
            active_page="worktime",
        )

    @app.route("/worktime/create", methods=["GET", "POST"], endpoint="worktime_create")
    def worktime_create():
        action = url_for("worktime_create")
        if request.method == "POST":
            try:
                data = bind_work_time(request.form)
                service.create(data)
                flash("Work time entry created.", "success")
                return redirect(url_for("worktime_index"))
            except WorkTimeValidationError as e:
                flash("Please correct the highlighted fields.", "danger")
                return _render_form(title="Create", action=action, values=_raw_values(request.form), errors=e.errors)
            except Exception:
                logger.exception("Failed to create work time entry")
                flash("System error while saving the entry", "danger")
                return _render_form(title="Create", action=action, values=_raw_values(request.form), errors={}, status=500)

        return _render_form(title="Create", action=action, values=_form_values(None), errors={})

    @app.route("/worktime/edit/<int:work_time_id>", methods=["GET", "POST"], endpoint="worktime_edit")
    def worktime_edit(work_time_id: int):
        action = url_for("worktime_edit", work_time_id=work_time_id)
        if request.method == "POST":
            try:
                data = bind_work_time(request.form, work_time_id=work_time_id)
                if not service.update(work_time_id, data):
                    return _not_found()
                flash("Work time entry updated.", "success")
                return redirect(url_for("worktime_index"))
            except WorkTimeValidationError as e:
                flash("Please correct the highlighted fields.", "danger")
                return _render_form(title="Edit", action=action, values=_raw_values(request.form), errors=e.errors)
            except Exception:
                logger.exception("Failed to update work time entry %s", work_time_id)
                flash("System error while saving the entry", "danger")
                return _render_form(title="Edit", action=action, values=_raw_values(request.form), errors={}, status=500)

        found, data = service.try_get(work_time_id)
        if not found:
            return _not_found()
        return _render_form(title="Edit", action=action, values=_form_values(data), errors={})

    @app.route("/worktime/delete/<int:work_time_id>", methods=["POST"], endpoint="worktime_delete")
    def worktime_delete(work_time_id: int):
        try:
            if service.delete(work_time_id):
                flash("Work time entry deleted.", "success")
            else:
                flash("Work time entry not found.", "warning")
        except Exception:
            logger.exception("Failed to delete work time entry %s", work_time_id)
            flash("System error while deleting the entry", "danger")

        return redirect(url_for("worktime_index"))
