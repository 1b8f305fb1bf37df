# src/services/exceptions.py

# --- Authorization Exceptions ---
class ForbiddenError(Exception):
    """인증된 사용자가 요청한 작업에 대한 권한이 없을 때"""

    def __init__(self, message: str, permission=None):
        super().__init__(message)
        # 실패한 권한 태그, any 검사는 요구된 태그들의 튜플 (멤버십 검사 실패 시 None)
        self.permission = permission

# --- Provisioning Exceptions ---
class RoleProvisioningError(Exception):
    """프로젝트의 기본 역할 생성에 실패했을 때"""
    pass
