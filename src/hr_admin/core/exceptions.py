from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base for errors rendered as ``{"detail": ..., "kind": ...}``."""

    kind = "error"

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class ValidationError(AppError):
    kind = "validation_error"

    def __init__(self, detail: str) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class FileValidationError(ValidationError):
    pass


class NotFoundError(AppError):
    kind = "not_found"

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            f"{resource} with id '{resource_id}' not found",
        )


class ConflictError(AppError):
    kind = "conflict"

    def __init__(self, detail: str) -> None:
        super().__init__(status.HTTP_409_CONFLICT, detail)


class AuthError(AppError):
    kind = "auth_error"

    def __init__(self, detail: str = "Not authenticated") -> None:
        super().__init__(
            status.HTTP_401_UNAUTHORIZED,
            detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(AppError):
    kind = "authorization_error"

    def __init__(self, required_role: str, current_role: str) -> None:
        super().__init__(
            status.HTTP_403_FORBIDDEN,
            f"Requires '{required_role}' role, but you have '{current_role}'",
        )


class StorageError(AppError):
    kind = "storage_error"

    def __init__(self, detail: str = "Storage is unavailable") -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)
