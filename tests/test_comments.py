import logging

import pytest

from thesis_guidance.models.submission import Submission


@pytest.fixture()
def submission(db, world, guidance):
    submission = Submission(
        guidance_session_id=guidance.id,
        uploaded_by=world.student_user.id,
        file_name="proposal.docx",
        file_path="uploads/proposal.docx",
        file_size=20480,
    )
    db.add(submission)
    db.commit()
    db.refresh(submission)
    return submission


def comment(client, headers, **payload):
    return client.post("/comments", headers=headers, json=payload)


def test_general_comment(client, world, guidance, auth_header):
    r = comment(
        client,
        auth_header(world.lecturer_user),
        guidance_session_id=guidance.id,
        sender_id=world.lecturer_user.id,
        receiver_id=world.student_user.id,
        content="Tighten the research question.",
        comment_type="GENERAL",
    )
    assert r.status_code == 201, r.text

    body = r.json()
    assert body["submission_id"] is None
    assert body["receiver_id"] == world.student_user.id
    assert body["comment_type"] == "GENERAL"


def test_file_comment(client, world, guidance, submission, auth_header):
    r = comment(
        client,
        auth_header(world.lecturer_user),
        guidance_session_id=guidance.id,
        submission_id=submission.id,
        sender_id=world.lecturer_user.id,
        content="Figure 3 is unreadable.",
        comment_type="FILE_COMMENT",
    )
    assert r.status_code == 201, r.text
    assert r.json()["submission_id"] == submission.id
    assert r.json()["receiver_id"] is None


def test_comment_on_missing_session(client, world, auth_header):
    r = comment(
        client,
        auth_header(world.lecturer_user),
        guidance_session_id=9999,
        sender_id=world.lecturer_user.id,
        content="hello",
        comment_type="GENERAL",
    )
    assert r.status_code == 404
    assert r.json()["detail"] == "Guidance session not found"


def test_comment_on_missing_submission(client, world, guidance, auth_header):
    r = comment(
        client,
        auth_header(world.lecturer_user),
        guidance_session_id=guidance.id,
        submission_id=9999,
        sender_id=world.lecturer_user.id,
        content="hello",
        comment_type="FILE_COMMENT",
    )
    assert r.status_code == 404
    assert r.json()["detail"] == "Submission not found"


def test_comment_from_unknown_sender(client, world, guidance, auth_header):
    r = comment(
        client,
        auth_header(world.lecturer_user),
        guidance_session_id=guidance.id,
        sender_id=9999,
        content="hello",
        comment_type="GENERAL",
    )
    assert r.status_code == 409


def test_list_and_delete_comments(client, world, guidance, submission, auth_header):
    headers = auth_header(world.lecturer_user)
    general = comment(
        client,
        headers,
        guidance_session_id=guidance.id,
        sender_id=world.lecturer_user.id,
        content="Overall fine.",
        comment_type="GENERAL",
    ).json()
    on_file = comment(
        client,
        headers,
        guidance_session_id=guidance.id,
        submission_id=submission.id,
        sender_id=world.student_user.id,
        receiver_id=world.lecturer_user.id,
        content="Updated the figure.",
        comment_type="FILE_COMMENT",
    ).json()

    r = client.get(f"/guidance-sessions/{guidance.id}/comments", headers=headers)
    assert [c["id"] for c in r.json()] == [general["id"], on_file["id"]]

    r = client.get(f"/submissions/{submission.id}/comments", headers=headers)
    assert [c["id"] for c in r.json()] == [on_file["id"]]

    assert client.delete(f"/comments/{general['id']}", headers=headers).json() is True
    assert client.delete(f"/comments/{general['id']}", headers=headers).json() is False

    r = client.get(f"/guidance-sessions/{guidance.id}/comments", headers=headers)
    assert [c["id"] for c in r.json()] == [on_file["id"]]


def test_created_comment_is_logged(client, world, guidance, auth_header, caplog):
    with caplog.at_level(logging.INFO, logger="thesis_guidance.crud.comments"):
        r = comment(
            client,
            auth_header(world.lecturer_user),
            guidance_session_id=guidance.id,
            sender_id=world.lecturer_user.id,
            content="Good progress.",
            comment_type="GENERAL",
        )
    assert r.status_code == 201, r.text

    assert f"created comment id={r.json()['id']} in session id={guidance.id} (GENERAL)" in caplog.text
