import logging

from flask import Flask, render_template, request, jsonify

import config
from engine import EMPATHY, evaluate, normalize_mode
from rules import build_blocklist

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Built once during app startup, read-only afterwards
BLOCKLIST = build_blocklist(config.BLOCKLIST_FILE)


@app.after_request
def add_cors_headers(resp):
    origin = request.headers.get("Origin")
    if "*" in config.ALLOWED_ORIGINS:
        resp.headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in config.ALLOWED_ORIGINS:
        resp.headers["Access-Control-Allow-Origin"] = origin
        resp.headers["Vary"] = "Origin"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return resp


@app.route('/')
def index():
    return render_template('index.html')


@app.route('/validate', methods=['POST', 'OPTIONS'])
def validate():
    if request.method == 'OPTIONS':
        return '', 204

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    password = data.get('password')
    mode = data.get('mode') or EMPATHY

    if not password or not isinstance(password, str):
        return jsonify({'error': "Password is required"}), 400

    result = evaluate(password, mode, blocklist=BLOCKLIST)
    logger.info("validate mode=%s valid=%s score=%d", normalize_mode(mode), result['isValid'], result['score'])
    return jsonify(result)


if __name__ == '__main__':
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on port %d", config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
