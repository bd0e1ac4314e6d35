# errors.py
from fastapi import HTTPException, status


class UnauthenticatedError(HTTPException):
    def __init__(self, detail="User must be authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InternalError(HTTPException):
    def __init__(self, detail="Internal error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )
