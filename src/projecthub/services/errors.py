"""Page-layer errors."""

from projecthub.utils.exit_codes import ERROR_GENERAL, ERROR_PERMISSION_DENIED


class AppError(Exception):
    """Application error carrying a CLI exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class PermissionDenied(AppError):
    """The caller's last-known role does not allow the action."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_PERMISSION_DENIED)
