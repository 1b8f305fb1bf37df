from .user import IUserRepository
from .project import IProjectRepository
from .role import IRoleRepository
from .membership import IMembershipRepository
