# ============================================
# tracker/views/utils.py
# ============================================
"""
drf-spectacular helpers shared by the tracker APIViews.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from rest_framework import serializers

# Body produced by taskhub.exceptions.api_exception_handler
ErrorSerializer = inline_serializer(name="Error", fields={"detail": serializers.CharField()})

DetailMessageSerializer = inline_serializer(name="DetailMessage", fields={"message": serializers.CharField()})

ERROR_DESCRIPTIONS = {
    400: "Invalid argument",
    401: "Missing or unknown credential",
    403: "Permission denied",
    404: "Not found",
}


def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)


def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(
        name, OpenApiTypes.INT, OpenApiParameter.QUERY,
        required=required, description=description
    )


def std_errors(extra: dict | None = None):
    """Error responses to merge into extend_schema(responses=...)"""
    errs = {
        code: OpenApiResponse(ErrorSerializer, description=text)
        for code, text in ERROR_DESCRIPTIONS.items()
    }
    errs.update(extra or {})
    return errs
