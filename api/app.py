import logging

from flask import Flask
from flask_restx import Api
from api.routes.tools_text_tickets import ns as text_tickets_ns

def create_app():
    app = Flask(__name__)
    api = Api(app, title="Kanban Ticket Tools", version="0.1", doc="/docs")
    api.add_namespace(text_tickets_ns, path="/api")

    return app

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(host="0.0.0.0", port=8080, debug=True)
