"""fixflow.server.app - Flask app factory and REST API routes.

This is a THIN REST wrapper: views come from ``fixflow.engine`` and
edits go through ``fixflow.editor``. The host (a browser front-end) owns
the navigation stack and requests one step view per frame.

State pattern:
    _state = {"store": store, "config": config}
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request
from flask_cors import CORS

from fixflow.editor import submit_edit, to_editable_text
from fixflow.engine import current_step, select_answer, start_view
from fixflow.notify import RecordingNotifier
from fixflow.store import GraphStore

logger = logging.getLogger(__name__)


def create_app(
    store: GraphStore,
    config: dict[str, Any],
    notifier: RecordingNotifier | None = None,
) -> Flask:
    """Create the Flask application with REST API routes.

    Args:
        store: Loaded graph store.
        config: fixflow configuration dict.
        notifier: Recorder the store notifies through; its notifications
            are attached to the response of the request that raised them.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)
    CORS(app)

    if notifier is None:
        notifier = RecordingNotifier()
        store.notify = notifier

    flow_config = config.get("flow", {})
    start_id = flow_config.get("start", "start")
    solution_prefix = flow_config.get("solution_prefix", "Solution: ")

    _state: dict[str, Any] = {"store": store, "config": config}

    def _with_notifications(payload: dict[str, Any]) -> dict[str, Any]:
        payload["notifications"] = [n.to_dict() for n in notifier.drain()]
        return payload

    @app.after_request
    def _no_cache(response):
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        return response

    # ─────────────────────────────────────────────────────────────────
    # Traversal endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/status")
    def api_status():
        """GET /api/status - Loading flag and flow summary."""
        s: GraphStore = _state["store"]
        return jsonify(
            _with_notifications(
                {
                    "is_loading": s.is_loading,
                    "start": start_id,
                    "has_start": s.graph.has_step(start_id),
                    "step_count": len(s.graph),
                }
            )
        )

    @app.route("/api/step/")
    def api_start():
        """GET /api/step/ - Root frame of the flow."""
        s: GraphStore = _state["store"]
        view = start_view(
            s.graph,
            is_loading=s.is_loading,
            start_id=start_id,
            solution_prefix=solution_prefix,
        )
        return jsonify(view.to_dict())

    @app.route("/api/step/<step_id>")
    def api_step(step_id: str):
        """GET /api/step/<step_id> - Frame for any step ID.

        Unknown IDs render the end-of-flow view, never a 404.
        """
        s: GraphStore = _state["store"]
        view = current_step(
            s.graph, step_id, is_loading=s.is_loading, solution_prefix=solution_prefix
        )
        return jsonify(view.to_dict())

    @app.route("/api/select", methods=["POST"])
    def api_select():
        """POST /api/select - Action for answer ``index`` of ``step_id``."""
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "error": "JSON object body required"}), 400
        step_id = data.get("step_id")
        index = data.get("index")
        if (
            not isinstance(step_id, str)
            or not step_id
            or not isinstance(index, int)
            or isinstance(index, bool)
        ):
            return jsonify({"success": False, "error": "step_id and index required"}), 400

        step = _state["store"].graph.find_by_id(step_id)
        if step is None or not 0 <= index < len(step.answers):
            return jsonify({"success": False, "error": "No such answer"}), 404
        action = select_answer(step.answers[index], solution_prefix)
        return jsonify({"success": True, "action": action.to_dict()})

    # ─────────────────────────────────────────────────────────────────
    # Editor endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/flow", methods=["GET"])
    def api_flow_get():
        """GET /api/flow - Current flow as editable JSON text."""
        return jsonify({"text": to_editable_text(_state["store"].graph)})

    @app.route("/api/flow", methods=["PUT"])
    def api_flow_put():
        """PUT /api/flow - Replace the flow with submitted text.

        200 when saved, 400 when the text is not a valid flow (the text is
        echoed back for correction), 500 when it could not be written.
        """
        data = request.get_json(force=True, silent=True)
        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str):
            return jsonify({"saved": False, "error": "text required"}), 400

        result = submit_edit(_state["store"], text, start_id=start_id)
        if result.saved:
            status_code = 200
        elif result.invalid:
            status_code = 400
        else:
            status_code = 500
        return jsonify(_with_notifications(result.to_dict())), status_code

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        """POST /api/reset - Restore the built-in flow."""
        result = _state["store"].reset()
        status_code = 200 if result.get("success") else 500
        return jsonify(_with_notifications(result)), status_code

    return app
