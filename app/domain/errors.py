# app/domain/errors.py
from fastapi import status


class CartServiceError(Exception):
    """
    Bazowy blad warstwy serwisu.
    status_code mapowany 1:1 na kod odpowiedzi HTTP przez router.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CartServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidRequestError(CartServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(CartServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class InternalError(CartServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
