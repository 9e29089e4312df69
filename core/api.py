"""
Django Ninja API configuration.
"""

import logging
from typing import Any
from ninja import NinjaAPI
from ninja.renderers import JSONRenderer
from ninja.errors import ValidationError, HttpError
from django.http import HttpRequest, HttpResponse
from pydantic import ValidationError as PydanticValidationError

from apps.blog.errors import BlogError

logger = logging.getLogger(__name__)


class SuccessWrapperRenderer(JSONRenderer):
    """Render every response as {success, data} or {success, error}."""

    def render(self, request: HttpRequest, data: Any, *, response_status: int) -> Any:
        # Error handlers build their own envelope
        if isinstance(data, dict) and "success" in data:
            return super().render(request, data, response_status=response_status)

        if 200 <= response_status < 300:
            wrapped = {"success": True, "data": data}
        else:
            wrapped = {"success": False, "error": data}

        return super().render(request, wrapped, response_status=response_status)


api = NinjaAPI(
    title="Ledgerline Blog API",
    version="1.0.0",
    description="Blog posts, search and authoring API",
    renderer=SuccessWrapperRenderer(),
)


@api.exception_handler(ValidationError)
def validation_errors(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.errors},
        status=422,
    )


@api.exception_handler(PydanticValidationError)
def pydantic_validation_errors(request: HttpRequest, exc: PydanticValidationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.errors(include_url=False, include_context=False)},
        status=422,
    )


@api.exception_handler(HttpError)
def http_error_handler(request: HttpRequest, exc: HttpError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": str(exc)},
        status=exc.status_code,
    )


@api.exception_handler(BlogError)
def blog_error_handler(request: HttpRequest, exc: BlogError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.message},
        status=exc.status_code,
    )


@api.exception_handler(Exception)
def generic_error_handler(request: HttpRequest, exc: Exception) -> HttpResponse:
    logger.exception(f"Unhandled error on {request.path}")
    return api.create_response(
        request,
        {"success": False, "error": str(exc)},
        status=500,
    )


# Health check
@api.get("/health")
def health_check(request: HttpRequest) -> dict:
    return {"status": "ok", "version": "1.0.0"}


# Import and register routers
from apps.auth.api import router as auth_router
from apps.blog.api import router as blog_router
from apps.admin.api import router as admin_router

api.add_router("/auth", auth_router, tags=["Auth"])
api.add_router("/blog", blog_router, tags=["Blog"])
api.add_router("/admin", admin_router, tags=["Admin"])
