"""
Custom Response Formatter for Standardized API Responses

Ensures all dashboard API responses follow the format:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}
"""
from rest_framework.views import exception_handler
from rest_framework.renderers import JSONRenderer


def custom_exception_handler(exc, context):
    """
    Exception handler that formats DRF error responses consistently:
    {"status": "error", "message": "...", "data": null}
    """
    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data)

    return response


def format_error_response(errors):
    """
    Format error payloads into the standard format.

    - {"field": ["error1", "error2"]} -> "field: error1, error2"
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    if isinstance(errors, dict):
        messages = []
        for field, field_errors in errors.items():
            if field == 'detail':
                messages.append(str(field_errors))
            elif isinstance(field_errors, (list, tuple)):
                messages.append(f"{field}: {', '.join(str(e) for e in field_errors)}")
            else:
                messages.append(f"{field}: {field_errors}")
        message = "; ".join(messages)
    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)
    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": None
    }


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps every response that isn't already formatted.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 No Content keeps an empty body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data)
            else:
                data = self.format_success_response(data)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        """Check if response already carries status/message/data keys."""
        return isinstance(data, dict) and {'status', 'message', 'data'} <= data.keys()

    def format_success_response(self, data):
        if isinstance(data, dict) and 'detail' in data:
            return {"status": "success", "message": str(data['detail']), "data": None}
        if data is None or (isinstance(data, dict) and not data):
            return {"status": "success", "message": "", "data": None}
        return {"status": "success", "message": "", "data": data}
