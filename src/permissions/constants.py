# src/permissions/constants.py
"""
프로젝트 권한 카탈로그.

권한 태그 문자열은 외부(감사 로그, 관리자 UI 등)와 공유되는 고정된 계약입니다.
태그를 추가할 때에는 presets.py의 기본 역할 구성도 함께 명시적으로 수정해야 합니다.
"""
import json
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional


class Permission(str, Enum):
    # 프로젝트 관리
    PROJECT_SETTINGS = "project.settings"
    PROJECT_DELETE = "project.delete"

    # 멤버 관리
    MEMBERS_INVITE = "members.invite"
    MEMBERS_MANAGE = "members.manage"
    MEMBERS_ADMIN = "members.admin"

    # 보드/컬럼 관리
    BOARD_MANAGE = "board.manage"

    # 티켓 관리
    TICKETS_CREATE = "tickets.create"
    TICKETS_MANAGE_OWN = "tickets.manage_own"
    TICKETS_MANAGE_ANY = "tickets.manage_any"

    SPRINTS_MANAGE = "sprints.manage"
    LABELS_MANAGE = "labels.manage"

    # 모더레이션 (댓글, 첨부파일)
    COMMENTS_MANAGE_ANY = "comments.manage_any"
    ATTACHMENTS_MANAGE_ANY = "attachments.manage_any"

    def __str__(self) -> str:
        return self.value


ALL_PERMISSIONS = tuple(Permission)


class PermissionCategory(str, Enum):
    PROJECT = "project"
    MEMBERS = "members"
    BOARD = "board"
    TICKETS = "tickets"
    SPRINTS = "sprints"
    LABELS = "labels"
    MODERATION = "moderation"


class PermissionMeta(NamedTuple):
    key: Permission
    label: str
    description: str
    category: PermissionCategory


class CategoryMeta(NamedTuple):
    key: PermissionCategory
    label: str
    description: str
    order: int


def _meta(key: Permission, label: str, description: str, category: PermissionCategory) -> PermissionMeta:
    return PermissionMeta(key, label, description, category)


PERMISSION_METADATA: Dict[Permission, PermissionMeta] = {
    meta.key: meta
    for meta in (
        _meta(Permission.PROJECT_SETTINGS, "Edit project settings",
              "Modify project name, description, and color", PermissionCategory.PROJECT),
        _meta(Permission.PROJECT_DELETE, "Delete project",
              "Permanently delete the project and all its data", PermissionCategory.PROJECT),
        _meta(Permission.MEMBERS_INVITE, "Invite members",
              "Send invitations to new project members", PermissionCategory.MEMBERS),
        _meta(Permission.MEMBERS_MANAGE, "Manage members",
              "Remove members and change their roles", PermissionCategory.MEMBERS),
        _meta(Permission.MEMBERS_ADMIN, "Administer permissions",
              "Create and edit custom roles, manage member permissions", PermissionCategory.MEMBERS),
        _meta(Permission.BOARD_MANAGE, "Manage columns",
              "Create, edit, delete, and reorder board columns", PermissionCategory.BOARD),
        _meta(Permission.TICKETS_CREATE, "Create tickets",
              "Create new tickets in the project", PermissionCategory.TICKETS),
        _meta(Permission.TICKETS_MANAGE_OWN, "Manage own tickets",
              "Edit and delete tickets you created", PermissionCategory.TICKETS),
        _meta(Permission.TICKETS_MANAGE_ANY, "Manage any ticket",
              "Edit and delete any ticket, assign tickets, bulk operations", PermissionCategory.TICKETS),
        _meta(Permission.SPRINTS_MANAGE, "Manage sprints",
              "Create, start, complete, edit, and delete sprints", PermissionCategory.SPRINTS),
        _meta(Permission.LABELS_MANAGE, "Manage labels",
              "Create, edit, and delete project labels", PermissionCategory.LABELS),
        _meta(Permission.COMMENTS_MANAGE_ANY, "Moderate comments",
              "Edit and delete any comment", PermissionCategory.MODERATION),
        _meta(Permission.ATTACHMENTS_MANAGE_ANY, "Moderate attachments",
              "Delete any attachment", PermissionCategory.MODERATION),
    )
}

CATEGORY_METADATA: Dict[PermissionCategory, CategoryMeta] = {
    PermissionCategory.PROJECT: CategoryMeta(
        PermissionCategory.PROJECT, "Project", "Project-level settings and management", 1),
    PermissionCategory.MEMBERS: CategoryMeta(
        PermissionCategory.MEMBERS, "Members", "Member and role management", 2),
    PermissionCategory.BOARD: CategoryMeta(
        PermissionCategory.BOARD, "Board", "Kanban board and column management", 3),
    PermissionCategory.TICKETS: CategoryMeta(
        PermissionCategory.TICKETS, "Tickets", "Ticket creation and management", 4),
    PermissionCategory.SPRINTS: CategoryMeta(
        PermissionCategory.SPRINTS, "Sprints", "Sprint planning and execution", 5),
    PermissionCategory.LABELS: CategoryMeta(
        PermissionCategory.LABELS, "Labels", "Project label management", 6),
    PermissionCategory.MODERATION: CategoryMeta(
        PermissionCategory.MODERATION, "Moderation", "Content moderation for comments and attachments", 7),
}

# 권한 JSON의 최대 길이 (비정상적으로 큰 입력으로 인한 메모리 낭비 방지)
MAX_PERMISSIONS_JSON_SIZE = 10_000


def get_permissions_by_category() -> Dict[PermissionCategory, List[PermissionMeta]]:
    """카테고리별로 권한 메타데이터를 묶어 반환합니다."""
    grouped: Dict[PermissionCategory, List[PermissionMeta]] = {category: [] for category in PermissionCategory}
    for meta in PERMISSION_METADATA.values():
        grouped[meta.category].append(meta)
    return grouped


def get_sorted_categories_with_permissions() -> List[Dict[str, object]]:
    """표시 순서대로 정렬된 카테고리와 각 카테고리의 권한 목록을 반환합니다."""
    by_category = get_permissions_by_category()
    return [
        {"category": category, "permissions": by_category[category.key]}
        for category in sorted(CATEGORY_METADATA.values(), key=lambda c: c.order)
    ]


def is_valid_permission(value) -> bool:
    """주어진 값이 카탈로그에 정의된 권한 태그인지 확인합니다."""
    if isinstance(value, Permission):
        return True
    try:
        Permission(value)
    except ValueError:
        return False
    return True


def parse_permissions(raw: Optional[str]) -> List[Permission]:
    """
    DB에 저장된 권한 JSON 배열을 파싱합니다.

    알 수 없는 태그는 조용히 제외되며, 입력이 비어 있거나 너무 크거나
    올바른 JSON 배열이 아니면 빈 리스트를 반환합니다. 순서는 유지하고 중복은 제거합니다.
    """
    if not raw or len(raw) > MAX_PERMISSIONS_JSON_SIZE:
        return []
    try:
        parsed = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(parsed, list):
        return []

    permissions: List[Permission] = []
    for item in parsed:
        if isinstance(item, str) and is_valid_permission(item):
            permission = Permission(item)
            if permission not in permissions:
                permissions.append(permission)
    return permissions


def serialize_permissions(permissions: Iterable) -> str:
    """
    권한 목록을 DB 저장용 JSON 배열 문자열로 변환합니다.

    Raises:
        ValueError: 카탈로그에 없는 권한 태그가 포함되어 있을 때.
    """
    tags: List[str] = []
    for permission in permissions:
        if not is_valid_permission(permission):
            raise ValueError(f"Unknown permission '{permission}'.")
        tag = Permission(permission).value
        if tag not in tags:
            tags.append(tag)
    return json.dumps(tags)
