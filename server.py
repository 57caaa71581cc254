import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from agents.advice import DailyTotals
from config_loader import SERVER_PORT
from pipeline import EstimatePipeline

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data


def create_app(pipeline: EstimatePipeline = None) -> Flask:
    app = Flask(__name__)
    app.json.ensure_ascii = False
    CORS(app)  # Enable CORS for all routes

    # --- Service Initialization (catalogs are built once at import) ---
    service = pipeline or EstimatePipeline()
    app.config["PIPELINE"] = service
    logger.info(
        "Catalogs ready: %d meals, %d exercises (threshold=%d)",
        len(service.resolver.meal_catalog),
        len(service.resolver.exercise_catalog),
        service.resolver.threshold
    )

    # --- Helper: Error Handling ---
    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description, "type": type(e).__name__}), e.code
        logger.error(f"Server Error: {str(e)}", exc_info=True)
        return jsonify({"error": str(e), "type": type(e).__name__}), 500

    @app.route('/api/health', methods=['GET'])
    def health():
        return jsonify({
            "status": "ok",
            "meal_catalog_size": len(service.resolver.meal_catalog),
            "exercise_catalog_size": len(service.resolver.exercise_catalog)
        })

    # --- Endpoint 1: Meal name -> catalog calories ---
    @app.route('/api/estimate-meal', methods=['POST'])
    def estimate_meal():
        data = _json_body()
        if data is None:
            return jsonify({"error": "Missing JSON body"}), 400

        meal_name = data.get("meal_name")
        if not meal_name or not isinstance(meal_name, str):
            return jsonify({"message": "meal_name が必要です"}), 400

        return jsonify(service.estimate_meal(meal_name).to_dict())

    # --- Endpoint 2: Exercise name x duration -> calories burned ---
    @app.route('/api/estimate-exercise', methods=['POST'])
    def estimate_exercise():
        data = _json_body()
        if data is None:
            return jsonify({"error": "Missing JSON body"}), 400

        exercise_name = data.get("exercise_name")
        duration = data.get("duration")
        if not exercise_name or not isinstance(exercise_name, str) or duration in (None, ""):
            return jsonify({"message": "名前と時間が必要です"}), 400

        try:
            output = service.estimate_exercise(exercise_name, duration)
        except ValueError as e:
            return jsonify({"message": str(e)}), 400
        return jsonify(output.to_dict())

    # --- Endpoint 3: Free-text meal registration with advice ---
    @app.route('/api/meal/ai', methods=['POST'])
    def register_meal():
        data = _json_body()
        if data is None:
            return jsonify({"error": "Missing JSON body"}), 400

        login_id = data.get("login_id")
        meal_input = data.get("meal_input")
        if not login_id or not meal_input or not isinstance(meal_input, str):
            return jsonify({"message": "入力が不足しています"}), 400

        return jsonify(service.register_meal(str(login_id), meal_input).to_dict())

    # --- Endpoint 4: Meals registered through this service ---
    @app.route('/api/meals/<login_id>', methods=['GET'])
    def list_meals(login_id):
        records = getattr(service.records, "meals_for", None)
        if records is None:
            return jsonify({"error": "Record listing not supported"}), 501
        return jsonify([r.to_dict() for r in records(login_id)])

    # --- Endpoint 5: Daily advice from today's totals ---
    @app.route('/api/advice', methods=['POST'])
    def daily_advice():
        data = _json_body()
        if data is None:
            return jsonify({"error": "Missing JSON body"}), 400

        try:
            totals = DailyTotals(**data)
        except ValidationError as e:
            return jsonify({"error": "Invalid totals", "details": e.errors(include_url=False)}), 400

        advice = service.daily_advice(
            totals.today_intake,
            totals.today_burn,
            totals.current_weight,
            totals.target_weight
        )
        return jsonify({"success": True, **advice.model_dump()})

    return app


if __name__ == "__main__":
    # Host on 0.0.0.0 to make it accessible to network ports
    port = SERVER_PORT()
    logger.info(f"Server starting on port {port}...")
    create_app().run(host='0.0.0.0', port=port, debug=False)
