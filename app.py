"""Flask app previewing generated statements and their binds."""

import logging
from typing import Any, Callable, Dict

from flask import Flask, Response, jsonify, request

from config import APP_CONFIG
from stmt_builder import (
    Statement, StatementError, json_delete, json_insert, json_select, json_update_bulk,
)

app = Flask(__name__)
app.json.sort_keys = APP_CONFIG['json_sort_keys']
logger = logging.getLogger(__name__)


def get_payload() -> Dict[str, Any]:
    """Read the JSON body, filling in the configured default database."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError('Request body must be a JSON object')
    if not payload.get('database') and APP_CONFIG['default_database']:
        payload['database'] = APP_CONFIG['default_database']
        logger.info(f"Set default database to {APP_CONFIG['default_database']}")
    return payload


def get_locale() -> str:
    """Locale for error messages: ?locale=, then Accept-Language, then config."""
    return (request.args.get('locale')
            or request.accept_languages.best_match(['en', 'fr'])
            or APP_CONFIG['locale'])


def render(handler: Callable[[Dict[str, Any]], Statement]) -> Response:
    statement = handler(get_payload())
    return jsonify(statement.to_dict())


@app.errorhandler(StatementError)
def handle_statement_error(e: StatementError) -> Response:
    """Missing or invalid statement parts: 400 with the translated message."""
    return jsonify({'error': e.message(get_locale()), 'field': e.field}), 400


@app.errorhandler(ValueError)
def handle_value_error(e: ValueError) -> Response:
    """Handle ValueError with 400 response."""
    return jsonify({'error': str(e)}), 400


@app.errorhandler(Exception)
def handle_general_error(e: Exception) -> Response:
    """Handle unexpected errors with 500 response."""
    logger.error(f'Server error: {e}')
    return jsonify({'error': 'Internal server error'}), 500


@app.route('/statement/select', methods=['POST'])
def select_statement():
    """Generate SELECT from JSON payload."""
    return render(json_select)


@app.route('/statement/insert', methods=['POST'])
def insert_statement():
    """Generate INSERT from JSON payload."""
    return render(json_insert)


@app.route('/statement/delete', methods=['POST'])
def delete_statement():
    """Generate DELETE from JSON payload."""
    return render(json_delete)


@app.route('/statement/update_bulk', methods=['POST'])
def update_bulk_statement():
    """Generate CASE-based bulk UPDATE from JSON payload."""
    return render(json_update_bulk)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False)
