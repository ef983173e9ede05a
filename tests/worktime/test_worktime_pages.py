from __future__ import annotations

from dataclasses import replace
from datetime import time

FORM = {
    "task_id": "1",
    "employee_id": "2",
    "work_date": "2024-01-10",
    "start_time": "09:00",
    "stop_time": "17:00",
}


def test_home_redirects_to_list(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/worktime")


def test_index_shows_names_and_display_formats(client, service, sample_entry):
    service.create(sample_entry)

    html = client.get("/worktime").get_data(as_text=True)
    assert "Requirements" in html
    assert "Peter Novak" in html
    assert "10/01/2024" in html
    assert "09:00" in html and "17:00" in html


def test_index_empty(client):
    assert "No work time recorded yet." in client.get("/worktime").get_data(as_text=True)


def test_create_form_lists_choices(client):
    html = client.get("/worktime/create").get_data(as_text=True)
    assert "Anna Kowalski" in html
    assert "Implementation" in html


def test_create_post_redirects_and_stores(client, work_time_repo):
    resp = client.post("/worktime/create", data=FORM)

    assert resp.status_code == 302
    assert len(work_time_repo.rows) == 1


def test_create_post_invalid_rerenders_with_errors(client, work_time_repo):
    resp = client.post("/worktime/create", data={**FORM, "start_time": "17:00", "stop_time": "09:00"})

    html = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Start time must be earlier than stop time" in html
    assert "Stop time must be later than start time" in html
    assert work_time_repo.rows == {}


def test_details_and_missing(client, service, sample_entry):
    service.create(sample_entry)

    assert "Collect requirements" in client.get("/worktime/details/1").get_data(as_text=True)
    assert client.get("/worktime/details/5").status_code == 404


def test_edit_get_prefills_and_post_updates(client, service, sample_entry):
    service.create(sample_entry)

    html = client.get("/worktime/edit/1").get_data(as_text=True)
    assert 'value="2024-01-10"' in html

    resp = client.post("/worktime/edit/1", data={**FORM, "stop_time": "18:00"})
    assert resp.status_code == 302
    assert service.try_get(1)[1] == replace(sample_entry, work_time_id=1, stop_time=time(18, 0))


def test_edit_missing_returns_404(client):
    assert client.get("/worktime/edit/3").status_code == 404
    assert client.post("/worktime/edit/3", data=FORM).status_code == 404


def test_delete_post(client, service, sample_entry):
    service.create(sample_entry)

    resp = client.post("/worktime/delete/1", follow_redirects=True)
    assert "Work time entry deleted." in resp.get_data(as_text=True)
    assert service.try_get(1) == (False, None)

    resp = client.post("/worktime/delete/1", follow_redirects=True)
    assert "Work time entry not found." in resp.get_data(as_text=True)


def test_edit_form_keeps_seconds(client, service, sample_entry):
    service.create(replace(sample_entry, start_time=time(9, 0, 10), stop_time=time(9, 0, 50)))

    html = client.get("/worktime/edit/1").get_data(as_text=True)
    assert 'value="09:00:10"' in html
    assert 'value="09:00:50"' in html

    resp = client.post(
        "/worktime/edit/1", data={**FORM, "start_time": "09:00:10", "stop_time": "09:00:50"}
    )
    assert resp.status_code == 302
    assert service.try_get(1)[1].stop_time == time(9, 0, 50)
