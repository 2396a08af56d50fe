import logging

from dotenv import load_dotenv

from flask import Flask, Response, request, jsonify

load_dotenv()

from config import DEBUG, HOST, PORT
from constants import DASHBOARD_QUERY_PARAM
from metric_mate.services.dashboard import build_dashboard_view, parse_dashboard_query
from metric_mate.services.rewrite import RewriteService, get_default_resolver, rewrite_response

app = Flask(__name__)
app.json.sort_keys = False
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
rewrite_service = RewriteService()


@app.after_request
def add_cors_headers(response: Response) -> Response:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.route("/")
def hello_world() -> str:
    logger.debug("Health check request received.")
    return "Metric Mate AI server"


@app.route("/api/rewrite", methods=["POST"])
def rewrite() -> tuple:
    """
    Rewrite survey text with the instructions registered for its mode.

    JSON body: { "text": "...", "mode": "kickoff_internal", "phase": null, "projectContext": null }
    phase is accepted but does not affect which instructions are used.
    """
    body = request.get_json(silent=True) or {}
    try:
        outcome = rewrite_service.rewrite(body)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("rewrite failed.")
        return jsonify({"error": str(e)}), 500

    payload, status = rewrite_response(outcome)
    return jsonify(payload), status


@app.route("/api/modes", methods=["GET"])
def list_modes() -> tuple:
    """Return every supported mode grouped by the table that owns it."""
    modes = get_default_resolver().supported_modes()
    logger.debug("Returning %d mode tables", len(modes))
    return jsonify({"modes": modes}), 200


@app.route("/api/dashboard", methods=["GET", "POST"])
def dashboard() -> tuple:
    """
    Normalize a dashboard payload and return the card view.

    POST takes the payload as the JSON body; GET takes it URL-encoded in ?data=.
    """
    try:
        if request.method == "POST":
            raw = request.get_json(silent=True)
        else:
            raw = parse_dashboard_query(request.args.get(DASHBOARD_QUERY_PARAM))
        view = build_dashboard_view(raw)
        return jsonify(view), 200
    except ValueError as e:
        logger.info("Dashboard payload rejected: %s", e)
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("dashboard view failed.")
        return jsonify({"error": str(e)}), 500


@app.route("/openai/health", methods=["GET"])
def openai_health() -> tuple:
    """Validate OpenAI SDK configuration by listing models with the rewrite client."""
    try:
        model_count = rewrite_service.client.count_models()
        logger.info("OpenAI health ok. Models=%d", model_count)
        return jsonify({"status": "ok", "models": model_count}), 200
    except Exception as e:
        logger.exception("OpenAI health failed.")
        return jsonify({"status": "error", "error": str(e)}), 500


if __name__ == "__main__":
    logger.info("AI server listening on port %d", PORT)
    app.run(host=HOST, port=PORT, debug=DEBUG)
