from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, json_error, json_ok
from ..common.serializers import employee_to_dict, task_to_dict, work_time_to_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    @api_errors
    def api_employees():
        return json_ok([employee_to_dict(e) for e in container.employees_repo.list_all()])

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="api_employee")
    @api_errors
    def api_employee(employee_id: int):
        employee = container.employees_repo.get_by_id(employee_id)
        if not employee:
            return json_error("Employee not found", 404)
        return json_ok(employee_to_dict(employee))

    @app.route("/api/employees/<int:employee_id>/tasks", methods=["GET"], endpoint="api_employee_tasks")
    @api_errors
    def api_employee_tasks(employee_id: int):
        tasks = container.work_time_service.list_tasks_for_employee(employee_id)
        return json_ok([task_to_dict(t) for t in tasks])

    @app.route("/api/employees/<int:employee_id>/worktime", methods=["GET"], endpoint="api_employee_worktime")
    @api_errors
    def api_employee_worktime(employee_id: int):
        entries = container.work_time_service.list_for_employee(employee_id)
        return json_ok([work_time_to_dict(d) for d in entries])
