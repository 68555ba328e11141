import logging

from flask import request
from flask_restx import Namespace, Resource, fields

from logic.errors import ConfigurationMissingError, InvalidRequestError, TicketToolError
from logic.llm_client import GENERIC_FAILURE_MESSAGE, get_api_key
from logic.ticket_converter import convert_text_to_tickets

logger = logging.getLogger(__name__)

ns = Namespace("text_tickets", description="Convert free-form text into Kanban tickets", path="")

convert_in = ns.model("ConvertIn", {
    "text": fields.String(required=True, description="Free-form text describing the work"),
})

ticket_out = ns.model("Ticket", {
    "id": fields.String, "title": fields.String, "description": fields.String,
    "status": fields.String, "category": fields.String, "section": fields.String,
    "isSubtask": fields.Boolean, "parentId": fields.String,
})

convert_out = ns.model("ConvertOut", {
    "tickets": fields.List(fields.Nested(ticket_out)),
})

error_out = ns.model("ErrorOut", {
    "error": fields.String, "details": fields.String,
})


def _error(message, status_code, details=None):
    body = {"error": message}
    if details:
        body["details"] = details
    return body, status_code


def _require_api_key():
    if not get_api_key():
        logger.warning("OPENAI_API_KEY is not set; text-to-tickets requests will fail.")
        raise ConfigurationMissingError("OpenAI API key not configured. Cannot process request.")


def _read_text():
    body = request.get_json(force=True, silent=True)
    if body is None:
        raise InvalidRequestError("Invalid JSON body")
    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str) or not text.strip():
        raise InvalidRequestError("No text provided or text is empty")
    return text


@ns.route("/create-tickets-from-text")
class CreateTicketsFromText(Resource):
    @ns.expect(convert_in)
    @ns.response(200, "Tickets generated", convert_out)
    @ns.response(400, "Invalid request", error_out)
    @ns.response(500, "Generation failed", error_out)
    def post(self):
        """Generate tickets from free-form text. Requires OPENAI_API_KEY."""

        try:
            _require_api_key()
        except ConfigurationMissingError as exc:
            return _error(str(exc), 500)

        try:
            text = _read_text()
        except InvalidRequestError as exc:
            return _error(str(exc), exc.status_code)

        try:
            tickets = convert_text_to_tickets(text)
        except TicketToolError as exc:
            logger.exception("Error calling completion API or parsing response")
            details = exc.details or f"{type(exc).__name__}: {exc}"
            return _error(str(exc) or GENERIC_FAILURE_MESSAGE, 500, details)
        except Exception as exc:  # pragma: no cover - guardrail
            logger.exception("Unexpected error generating tickets")
            return _error(str(exc) or GENERIC_FAILURE_MESSAGE, 500, f"{type(exc).__name__}: {exc}")

        return {"tickets": tickets}, 200

    def get(self):
        return self._method_not_allowed()

    def put(self):
        return self._method_not_allowed()

    def patch(self):
        return self._method_not_allowed()

    def delete(self):
        return self._method_not_allowed()

    def options(self):
        return self._method_not_allowed()

    @staticmethod
    def _method_not_allowed():
        try:
            _require_api_key()
        except ConfigurationMissingError as exc:
            return _error(str(exc), 500)
        return _error("Method Not Allowed", 405)
