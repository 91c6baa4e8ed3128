import pytest
from pydantic import ValidationError

from app.modules.documents.schemas import (
    CommentDocument,
    NotificationDocument,
    ProjectDocument,
    TaskDocument,
    UserDocument,
)


def _user(**overrides):
    data = {
        "username": "john_doe",
        "email": "john@example.com",
        "password": "$2a$10$hash",
        "role": "ROLE_DEVELOPER",
        "enabled": True,
        "active": True,
        "firstName": "John",
    }
    data.update(overrides)
    return data


def _project(**overrides):
    data = {
        "name": "Website Redesign",
        "status": "IN_PROGRESS",
        "priority": "HIGH",
        "ownerId": "u-1",
        "createdBy": "u-1",
        "memberIds": ["u-2", "u-3"],
    }
    data.update(overrides)
    return data


def test_user_document():
    user = UserDocument.model_validate(_user())

    assert user.role == "ROLE_DEVELOPER"
    assert user.first_name == "John"


@pytest.mark.parametrize("overrides", [
    {"username": "jd"},
    {"username": "john doe"},
    {"email": "not-an-email"},
    {"role": "ROLE_GUEST"},
])
def test_user_document_rejects(overrides):
    with pytest.raises(ValidationError):
        UserDocument.model_validate(_user(**overrides))


def test_project_document():
    project = ProjectDocument.model_validate(_project())

    assert project.status == "IN_PROGRESS"
    assert project.member_ids == ["u-2", "u-3"]


def test_project_active_status_is_not_canonical():
    with pytest.raises(ValidationError):
        ProjectDocument.model_validate(_project(status="ACTIVE"))


def test_project_priority_has_no_critical():
    with pytest.raises(ValidationError):
        ProjectDocument.model_validate(_project(priority="CRITICAL"))


def test_task_document():
    task = TaskDocument.model_validate({
        "projectId": "p-1",
        "name": "Design homepage",
        "status": "REVIEW",
        "priority": "CRITICAL",
        "createdBy": "u-1",
        "tags": ["ui"],
    })

    assert task.priority == "CRITICAL"
    assert task.project_id == "p-1"

    with pytest.raises(ValidationError):
        TaskDocument.model_validate({
            "projectId": "p-1", "name": "", "status": "TODO", "priority": "LOW", "createdBy": "u-1",
        })


def test_comment_document():
    comment = CommentDocument.model_validate({
        "parentId": "t-1", "parentType": "TASK", "content": "Looks good", "userId": "u-2",
    })

    assert comment.deleted is False

    with pytest.raises(ValidationError):
        CommentDocument.model_validate({
            "parentId": "t-1", "parentType": "FILE", "content": "x", "userId": "u-2",
        })
    with pytest.raises(ValidationError):
        CommentDocument.model_validate({
            "parentId": "t-1", "parentType": "TASK", "content": "x" * 5001, "userId": "u-2",
        })


def test_notification_document():
    notification = NotificationDocument.model_validate({
        "recipientUserId": "u-3",
        "eventType": "TASK_ASSIGNED",
        "message": "You were assigned a task",
        "entityType": "TASK",
        "entityId": "t-1",
        "channel": "IN_APP",
    })

    assert notification.is_read is False

    with pytest.raises(ValidationError):
        NotificationDocument.model_validate({
            "recipientUserId": "u-3",
            "eventType": "TASK_ASSIGNED",
            "message": "hi",
            "entityType": "TASK",
            "entityId": "t-1",
            "channel": "FAX",
        })


def test_documents_dump_with_stored_field_names():
    dumped = ProjectDocument.model_validate(_project()).model_dump(by_alias=True, exclude_none=True)

    assert dumped["ownerId"] == "u-1"
    assert dumped["status"] == "IN_PROGRESS"
