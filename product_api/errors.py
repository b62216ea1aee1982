# product_api/errors.py
from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse

# Error taxonomy shared by the handlers and the middleware chain.


class ProductAPIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProductAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Validation Error"


class NotFoundError(ProductAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Product not found"

    def __init__(self, product_id: str):
        super().__init__(f"Product with id {product_id} does not exist")
        self.product_id = product_id


class UnauthorizedError(ProductAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"

    def __init__(self, message: str = "Please provide a valid authorization token"):
        super().__init__(message)


class InternalError(ProductAPIError):
    def __init__(self, message: str = "Something went wrong on our end"):
        super().__init__(message)


def error_body(error: str, message: str) -> Dict[str, Any]:
    return {"error": error, "message": message}


def error_response(exc: ProductAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error, exc.message))


def not_found_response(product_id: str) -> JSONResponse:
    return error_response(NotFoundError(product_id))
