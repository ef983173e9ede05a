from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, json_body, json_error, json_ok
from ..common.serializers import employee_to_dict, task_to_dict, work_time_to_dict
from ..container import Container
from .validation import bind_work_time

NOT_FOUND = "Work time entry not found"


def register(app: Flask, container: Container) -> None:
    service = container.work_time_service

    @app.route("/api/worktime", methods=["GET"], endpoint="api_worktime_list")
    @api_errors
    def api_worktime_list():
        return json_ok([work_time_to_dict(d) for d in service.list_all()])

    @app.route("/api/worktime/<int:work_time_id>", methods=["GET"], endpoint="api_worktime_get")
    @api_errors
    def api_worktime_get(work_time_id: int):
        found, data = service.try_get(work_time_id)
        if not found:
            return json_error(NOT_FOUND, 404)
        return json_ok(work_time_to_dict(data))

    @app.route("/api/worktime", methods=["POST"], endpoint="api_worktime_create")
    @api_errors
    def api_worktime_create():
        data = bind_work_time(json_body())
        work_time_id = service.create(data)
        return json_ok(status=201, id=work_time_id)

    @app.route("/api/worktime/<int:work_time_id>", methods=["PUT"], endpoint="api_worktime_update")
    @api_errors
    def api_worktime_update(work_time_id: int):
        data = bind_work_time(json_body(), work_time_id=work_time_id)
        if not service.update(work_time_id, data):
            return json_error(NOT_FOUND, 404)
        return json_ok(message="Updated")

    @app.route("/api/worktime/<int:work_time_id>", methods=["DELETE"], endpoint="api_worktime_delete")
    @api_errors
    def api_worktime_delete(work_time_id: int):
        if not service.delete(work_time_id):
            return json_error(NOT_FOUND, 404)
        return json_ok(message="Deleted")

    @app.route("/api/worktime/<int:work_time_id>/employee", methods=["GET"], endpoint="api_worktime_employee")
    @api_errors
    def api_worktime_employee(work_time_id: int):
        return json_ok(employee_to_dict(service.get_employee(work_time_id)))

    @app.route("/api/worktime/<int:work_time_id>/task", methods=["GET"], endpoint="api_worktime_task")
    @api_errors
    def api_worktime_task(work_time_id: int):
        return json_ok(task_to_dict(service.get_task(work_time_id)))
