from .user import User
from .project import Project
from .role import Role
from .project_member import ProjectMember

__all__ = ["User", "Project", "Role", "ProjectMember"]
