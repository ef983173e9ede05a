from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, json_error, json_ok
from ..common.serializers import employee_to_dict, task_to_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", methods=["GET"], endpoint="api_tasks")
    @api_errors
    def api_tasks():
        return json_ok([task_to_dict(t) for t in container.tasks_repo.list_all()])

    @app.route("/api/tasks/<int:task_id>", methods=["GET"], endpoint="api_task")
    @api_errors
    def api_task(task_id: int):
        task = container.tasks_repo.get_by_id(task_id)
        if not task:
            return json_error("Task not found", 404)
        return json_ok(task_to_dict(task))

    @app.route("/api/tasks/<int:task_id>/employees", methods=["GET"], endpoint="api_task_employees")
    @api_errors
    def api_task_employees(task_id: int):
        employees = container.work_time_service.list_employees_for_task(task_id)
        return json_ok([employee_to_dict(e) for e in employees])
