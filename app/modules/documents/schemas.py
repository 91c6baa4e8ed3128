"""
Document contracts of the project-management store.

Each service owns one collection (userdb.users, projectdb.projects,
taskdb.tasks, commentdb.comments, notificationdb.notifications). The store
enforces these rules in its validators; the models below mirror them so that
records referencing user and role data can be checked before they are written.
Field names use the stored camelCase form as aliases.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.rbac.models import Role

USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class ProjectPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"
    BLOCKED = "BLOCKED"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class CommentParentType(str, Enum):
    PROJECT = "PROJECT"
    TASK = "TASK"
    COMMENT = "COMMENT"


class NotificationEventType(str, Enum):
    TASK_ASSIGNED = "TASK_ASSIGNED"
    TASK_COMPLETED = "TASK_COMPLETED"
    PROJECT_CREATED = "PROJECT_CREATED"
    COMMENT_ADDED = "COMMENT_ADDED"
    DEADLINE_APPROACHING = "DEADLINE_APPROACHING"
    USER_MENTIONED = "USER_MENTIONED"


class EntityType(str, Enum):
    USER = "USER"
    PROJECT = "PROJECT"
    TASK = "TASK"
    COMMENT = "COMMENT"


class NotificationChannel(str, Enum):
    EMAIL = "EMAIL"
    IN_APP = "IN_APP"
    PUSH = "PUSH"
    SMS = "SMS"


class StoredDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: Optional[str] = Field(default=None, alias="_id")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class UserDocument(StoredDocument):
    username: str = Field(min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str
    role: Role
    enabled: bool
    active: bool
    first_name: Optional[str] = Field(default=None, max_length=100, alias="firstName")
    last_name: Optional[str] = Field(default=None, max_length=100, alias="lastName")
    last_login: Optional[datetime] = Field(default=None, alias="lastLogin")
    email_verified: Optional[bool] = Field(default=None, alias="emailVerified")
    locked: Optional[bool] = None
    profile_picture_url: Optional[str] = Field(default=None, alias="profilePictureUrl")


class ProjectDocument(StoredDocument):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    status: ProjectStatus
    priority: ProjectPriority
    owner_id: str = Field(alias="ownerId")
    created_by: str = Field(alias="createdBy")
    manager_ids: List[str] = Field(default_factory=list, alias="managerIds")
    member_ids: List[str] = Field(default_factory=list, alias="memberIds")
    task_ids: List[str] = Field(default_factory=list, alias="taskIds")
    start_date: Optional[datetime] = Field(default=None, alias="startDate")
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    last_modified_by: Optional[str] = Field(default=None, alias="lastModifiedBy")
    version: Optional[int] = None


class TaskDocument(StoredDocument):
    project_id: str = Field(alias="projectId")
    name: str = Field(min_length=1, max_length=200)
    status: TaskStatus
    priority: TaskPriority
    created_by: str = Field(alias="createdBy")
    description: Optional[str] = Field(default=None, max_length=5000)
    updated_by: Optional[str] = Field(default=None, alias="updatedBy")
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")
    assignee_id: Optional[str] = Field(default=None, alias="assigneeId")
    tags: List[str] = Field(default_factory=list)
    version: Optional[int] = None


class CommentDocument(StoredDocument):
    parent_id: str = Field(alias="parentId")
    parent_type: CommentParentType = Field(alias="parentType")
    content: str = Field(min_length=1, max_length=5000)
    user_id: str = Field(alias="userId")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    parent_comment_id: Optional[str] = Field(default=None, alias="parentCommentId")
    deleted: bool = False
    version: Optional[int] = None


class NotificationDocument(StoredDocument):
    recipient_user_id: str = Field(alias="recipientUserId")
    event_type: NotificationEventType = Field(alias="eventType")
    message: str = Field(max_length=1000)
    entity_type: EntityType = Field(alias="entityType")
    entity_id: str = Field(alias="entityId")
    channel: NotificationChannel
    is_read: bool = Field(default=False, alias="isRead")
    payload: Optional[Dict[str, Any]] = None
    version: Optional[int] = None
