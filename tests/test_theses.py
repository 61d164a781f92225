from datetime import datetime

import pytest

from thesis_guidance.crud import theses as theses_crud
from thesis_guidance.models.thesis import Thesis, ThesisLecturer
from thesis_guidance.schemas.thesis import ThesisCreate


def parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def thesis_payload(world, **overrides):
    payload = {
        "student_id": world.student.id,
        "title": "Scheduling guidance sessions with constraint solvers",
        "description": "Initial proposal",
        "lecturer_ids": [lecturer.id for lecturer in world.lecturers],
    }
    payload.update(overrides)
    return payload


def create_thesis(client, world, auth_header, **overrides):
    return client.post(
        "/theses",
        headers=auth_header(world.admin),
        json=thesis_payload(world, **overrides),
    )


def test_create_thesis_links_supervisors_in_order(client, world, auth_header, db):
    first_id, second_id = (lecturer.id for lecturer in world.lecturers)

    r = create_thesis(client, world, auth_header)
    assert r.status_code == 201, r.text

    body = r.json()
    assert body["status"] == "PROPOSAL"
    assert body["student_id"] == world.student.id

    links = (
        db.query(ThesisLecturer)
        .filter(ThesisLecturer.thesis_id == body["id"])
        .order_by(ThesisLecturer.id)
        .all()
    )
    assert [(link.lecturer_id, link.is_primary) for link in links] == [
        (first_id, True),
        (second_id, False),
    ]


def test_primary_follows_given_order(client, world, auth_header, db):
    first_id, second_id = (lecturer.id for lecturer in world.lecturers)

    r = create_thesis(client, world, auth_header, lecturer_ids=[second_id, first_id])
    assert r.status_code == 201, r.text

    primary = (
        db.query(ThesisLecturer)
        .filter(ThesisLecturer.thesis_id == r.json()["id"], ThesisLecturer.is_primary.is_(True))
        .one()
    )
    assert primary.lecturer_id == second_id


def test_create_thesis_requires_admin(client, world, auth_header):
    r = client.post(
        "/theses",
        headers=auth_header(world.student_user),
        json=thesis_payload(world),
    )
    assert r.status_code == 403


@pytest.mark.parametrize("lecturer_ids", [[], None])
def test_create_thesis_needs_lecturers(client, world, auth_header, db, lecturer_ids):
    r = create_thesis(client, world, auth_header, lecturer_ids=lecturer_ids)
    assert r.status_code == 422
    assert db.query(Thesis).count() == 0


def test_create_thesis_rejects_duplicate_lecturers(client, world, auth_header, db):
    first_id = world.lecturers[0].id

    r = create_thesis(client, world, auth_header, lecturer_ids=[first_id, first_id])
    assert r.status_code == 422
    assert db.query(Thesis).count() == 0


def test_create_thesis_unknown_student(client, world, auth_header, db):
    r = create_thesis(client, world, auth_header, student_id=9999)
    assert r.status_code == 404
    assert r.json()["detail"] == "Student not found"
    assert db.query(Thesis).count() == 0


def test_create_thesis_unknown_lecturer(client, world, auth_header, db):
    r = create_thesis(client, world, auth_header, lecturer_ids=[world.lecturers[0].id, 9999])
    assert r.status_code == 404
    assert "9999" in r.json()["detail"]
    assert db.query(Thesis).count() == 0
    assert db.query(ThesisLecturer).count() == 0


def test_failed_supervisor_link_rolls_back_thesis(world, db, monkeypatch):
    data = ThesisCreate(**thesis_payload(world))

    def broken_link(**kwargs):
        raise RuntimeError("link insert failed")

    monkeypatch.setattr(theses_crud, "ThesisLecturer", broken_link)

    with pytest.raises(RuntimeError):
        theses_crud.create_thesis(db, data)

    assert db.query(Thesis).count() == 0
    assert db.query(ThesisLecturer).count() == 0


def test_partial_update(client, world, auth_header):
    created = create_thesis(client, world, auth_header).json()
    headers = auth_header(world.lecturer_user)

    r = client.patch(f"/theses/{created['id']}", headers=headers, json={"status": "IN_PROGRESS"})
    assert r.status_code == 200, r.text

    body = r.json()
    assert body["status"] == "IN_PROGRESS"
    assert body["title"] == created["title"]
    assert body["description"] == "Initial proposal"
    assert parse(body["updated_at"]) > parse(created["updated_at"])


def test_update_null_description_clears_it(client, world, auth_header):
    created = create_thesis(client, world, auth_header).json()

    r = client.patch(
        f"/theses/{created['id']}",
        headers=auth_header(world.admin),
        json={"description": None},
    )
    assert r.status_code == 200
    assert r.json()["description"] is None
    assert r.json()["title"] == created["title"]


def test_update_rejects_null_title(client, world, auth_header):
    created = create_thesis(client, world, auth_header).json()

    r = client.patch(
        f"/theses/{created['id']}",
        headers=auth_header(world.admin),
        json={"title": None},
    )
    assert r.status_code == 422


def test_update_permissions_and_missing(client, world, auth_header):
    created = create_thesis(client, world, auth_header).json()

    r = client.patch(
        f"/theses/{created['id']}",
        headers=auth_header(world.student_user),
        json={"title": "Mine now"},
    )
    assert r.status_code == 403

    r = client.patch("/theses/9999", headers=auth_header(world.admin), json={"title": "x"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Thesis not found"


def test_get_thesis_detail(client, world, auth_header):
    created = create_thesis(client, world, auth_header).json()
    headers = auth_header(world.student_user)

    r = client.get(f"/theses/{created['id']}", headers=headers)
    assert r.status_code == 200

    detail = r.json()
    assert detail["student"]["full_name"] == "Siti Rahma"
    assert [s["lecturer"]["full_name"] for s in detail["supervisors"]] == ["Dr. Budi", "Dr. Ayu"]
    assert [s["is_primary"] for s in detail["supervisors"]] == [True, False]

    assert client.get("/theses/9999", headers=headers).json() is None


def test_list_theses_by_student_and_lecturer(client, world, auth_header, make_student):
    first_id, second_id = (lecturer.id for lecturer in world.lecturers)
    headers = auth_header(world.admin)

    mine = create_thesis(client, world, auth_header, lecturer_ids=[first_id]).json()
    other_student = make_student("Andi")
    theirs = create_thesis(
        client, world, auth_header, student_id=other_student.id, lecturer_ids=[second_id]
    ).json()

    r = client.get(f"/students/{world.student.id}/theses", headers=headers)
    assert [t["id"] for t in r.json()] == [mine["id"]]

    r = client.get(f"/lecturers/{second_id}/theses", headers=headers)
    assert [t["id"] for t in r.json()] == [theirs["id"]]

    r = client.get("/theses", headers=headers)
    assert [t["id"] for t in r.json()] == [mine["id"], theirs["id"]]


def test_list_theses_for_student_without_any(client, world, auth_header):
    r = client.get(f"/students/{world.student.id}/theses", headers=auth_header(world.admin))
    assert r.status_code == 200
    assert r.json() == []


def test_delete_thesis(client, world, auth_header, db):
    created = create_thesis(client, world, auth_header).json()

    r = client.delete(f"/theses/{created['id']}", headers=auth_header(world.lecturer_user))
    assert r.status_code == 403

    assert client.delete(f"/theses/{created['id']}", headers=auth_header(world.admin)).json() is True
    assert client.delete(f"/theses/{created['id']}", headers=auth_header(world.admin)).json() is False
    assert db.query(ThesisLecturer).count() == 0
