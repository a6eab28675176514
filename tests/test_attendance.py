from backend.app.core.time import utc_today


def test_teacher_records_attendance(teacher_client, school):
    response = teacher_client.post(
        "/api/attendance", json={"student_id": school["ahmad_id"], "date": "2024-04-01", "status": "present"}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    detail = teacher_client.get(f"/api/students/{school['ahmad_id']}").json()
    assert detail["attendance"][0]["status"] == "present"
    assert detail["attendance"][0]["date"] == "2024-04-01"


def test_new_attendance_keeps_detail_sorted(teacher_client, school):
    student_id = school["siti_id"]
    teacher_client.post("/api/attendance", json={"student_id": student_id, "date": "2024-04-10", "status": "late"})
    teacher_client.post(
        "/api/attendance", json={"student_id": student_id, "date": utc_today().isoformat(), "status": "present"}
    )
    teacher_client.post("/api/attendance", json={"student_id": student_id, "date": "2024-04-12", "status": "absent"})

    dates = [a["date"] for a in teacher_client.get(f"/api/students/{student_id}").json()["attendance"]]
    assert dates == sorted(dates, reverse=True)
    assert dates[0] == utc_today().isoformat()


def test_student_cannot_record_attendance(student_client, school):
    response = student_client.post(
        "/api/attendance", json={"student_id": school["ahmad_id"], "date": "2024-04-01", "status": "present"}
    )
    assert response.status_code == 403


def test_anonymous_cannot_record_attendance(client, school):
    response = client.post(
        "/api/attendance", json={"student_id": school["ahmad_id"], "date": "2024-04-01", "status": "present"}
    )
    assert response.status_code == 401


def test_attendance_for_unknown_student_returns_404(teacher_client):
    response = teacher_client.post(
        "/api/attendance", json={"student_id": 999, "date": "2024-04-01", "status": "present"}
    )
    assert response.status_code == 404


def test_attendance_rejects_unknown_status(teacher_client, school):
    response = teacher_client.post(
        "/api/attendance", json={"student_id": school["ahmad_id"], "date": "2024-04-01", "status": "holiday"}
    )
    assert response.status_code == 422


def test_attendance_rejects_malformed_date(teacher_client, school):
    response = teacher_client.post(
        "/api/attendance", json={"student_id": school["ahmad_id"], "date": "yesterday", "status": "present"}
    )
    assert response.status_code == 422


def test_second_attendance_same_day_returns_409(teacher_client, school):
    payload = {"student_id": school["ahmad_id"], "date": "2024-04-01", "status": "present"}
    assert teacher_client.post("/api/attendance", json=payload).status_code == 200
    response = teacher_client.post("/api/attendance", json={**payload, "status": "late"})
    assert response.status_code == 409
