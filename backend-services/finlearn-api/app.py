# backend-services/finlearn-api/app.py
import os
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime, timezone
from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

# --- 1. Initialize Flask App and Basic Config ---
app = Flask(__name__)
PORT = int(os.getenv("PORT", 4000))
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
APP_ENV = os.getenv("APP_ENV", os.getenv("FLASK_ENV", "production")).lower()
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Thai content is served as-is and payload field order is kept for the frontend
app.json.ensure_ascii = False
app.json.sort_keys = False

# Only the frontend's origin may call the API from a browser
CORS(app, resources={r"/api/*": {"origins": FRONTEND_URL}}, supports_credentials=True)

# --- 2. Define Logging Setup Function ---
def setup_logging(app):
    """Configures comprehensive logging for the Flask app."""
    log_level_str = os.environ.get("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Handlers (console + rotating file), built once
    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # An empty LOG_DIR disables the file handler (used by the test suite)
    log_directory = os.environ.get("LOG_DIR", "/app/logs")
    file_logging_error = None
    if log_directory:
        try:
            os.makedirs(log_directory, exist_ok=True)
            log_file = os.path.join(log_directory, "finlearn_api.log")
            file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            file_logging_error = e

    app.logger.setLevel(log_level)
    app.logger.propagate = False

    # Clear existing handlers to avoid duplication
    for h in list(app.logger.handlers):
        app.logger.removeHandler(h)

    # Attach the handlers to app.logger
    for h in handlers:
        app.logger.addHandler(h)

    # prevent werkzeug from duplicating to root/stdout
    werk = logging.getLogger("werkzeug")
    werk.propagate = False
    for h in list(werk.handlers):
        if isinstance(h, logging.StreamHandler):
            werk.removeHandler(h)

    # Module loggers that should emit through the same handlers
    module_names = [
        "catalog.stocks",
        "catalog.lessons",
        "catalog.sp500",
        "catalog.price_history",
        "services.stock_service",
        "services.lesson_service",
        "services.sp500_service",
        "helper_functions",
    ]
    for name in module_names:
        module_loggers = logging.getLogger(name)
        module_loggers.setLevel(log_level)
        module_loggers.propagate = False
        # Clear existing handlers
        for h in list(module_loggers.handlers):
            module_loggers.removeHandler(h)
        # Attach shared handlers
        for h in handlers:
            module_loggers.addHandler(h)

    if file_logging_error is not None:
        app.logger.warning(f"File logging disabled, could not use '{log_directory}': {file_logging_error}")
    app.logger.info("FinLearn API logging initialized.")
# --- End of Logging Setup ---
setup_logging(app)

# --- 3. Import Project-Specific Modules ---
from catalog.stocks import POPULAR_SYMBOLS, build_stock_catalog, build_search_entries
from catalog.lessons import build_lesson_catalog
from catalog.sp500 import build_sp500_frame
from services.stock_service import StockLookupService
from services.lesson_service import LessonService
from services.sp500_service import Sp500Directory
from helper_functions import (
    normalize_symbol,
    parse_int_arg,
    dump_model,
    dump_models,
    error_body,
    stock_not_found_message,
)
from shared.contracts import (
    SP500_DEFAULT_LIMIT,
    HealthStatus,
    LessonIndexResponse,
    PopularStockCard,
)

# --- 4. Catalogs and Services ---
# Built once; an invalid catalog stops the process here.
stock_service = StockLookupService(build_stock_catalog(), build_search_entries(), POPULAR_SYMBOLS)
lesson_service = LessonService(build_lesson_catalog())
sp500_directory = Sp500Directory(build_sp500_frame())


# --- 5. Error Handlers ---
@app.errorhandler(HTTPException)
def handle_http_exception(e):
    """Unknown routes, wrong methods and other HTTP errors keep the JSON error shape."""
    return jsonify(error_body(e.name)), e.code

@app.errorhandler(Exception)
def handle_unexpected_exception(e):
    app.logger.critical(f"Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
    message = str(e) if APP_ENV == "development" else None
    return jsonify(error_body("Internal Server Error", message)), 500


# --- 6. Routes ---
@app.route('/api/health', methods=['GET'])
def health_check():
    payload = HealthStatus(
        status="ok",
        message="FinLearn API is running",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        version=APP_VERSION,
    )
    return jsonify(dump_model(payload)), 200

@app.route('/api/stocks/search', methods=['GET'])
def search_stocks():
    """GET /api/stocks/search?q=apple. An absent or empty q is an empty result."""
    query = request.args.get('q', '')
    if not query:
        return jsonify([]), 200
    try:
        results = stock_service.search(query)
        return jsonify(dump_models(results)), 200
    except Exception as e:
        app.logger.error(f"Search error for '{query}': {e}", exc_info=True)
        return jsonify(error_body("Failed to search stocks")), 500

@app.route('/api/stocks/popular', methods=['GET'])
def get_popular_stocks():
    """Featured stocks, simplified for the home page cards."""
    try:
        cards = [PopularStockCard.from_record(record) for record in stock_service.get_popular()]
        return jsonify(dump_models(cards)), 200
    except Exception as e:
        app.logger.error(f"Popular stocks error: {e}", exc_info=True)
        return jsonify(error_body("Failed to get popular stocks")), 500

@app.route('/api/stocks/sp500', methods=['GET'])
def get_sp500_stocks():
    """GET /api/stocks/sp500?page=1&limit=50&sector=Financials"""
    page = parse_int_arg(request.args.get('page'), 1, name="page")
    limit = parse_int_arg(request.args.get('limit'), SP500_DEFAULT_LIMIT, name="limit")
    sector = request.args.get('sector') or None
    try:
        result = sp500_directory.list_page(page=page, limit=limit, sector=sector)
        return jsonify(dump_model(result)), 200
    except Exception as e:
        app.logger.error(f"S&P 500 listing error (page={page}, limit={limit}, sector={sector!r}): {e}", exc_info=True)
        return jsonify(error_body("Failed to get S&P 500 stocks")), 500

@app.route('/api/stocks/<symbol>', methods=['GET'])
def get_stock(symbol):
    try:
        record = stock_service.get_by_symbol(symbol)
        if record is None:
            return jsonify(error_body(stock_not_found_message(symbol))), 404
        return jsonify(dump_model(record)), 200
    except Exception as e:
        app.logger.error(f"Stock data error for {normalize_symbol(symbol)}: {e}", exc_info=True)
        return jsonify(error_body("Failed to get stock data")), 500

@app.route('/api/lessons', methods=['GET'])
def list_lessons():
    """All lessons as summaries (no sections or quiz), plus the category list."""
    payload = LessonIndexResponse(
        categories=lesson_service.list_categories(),
        lessons=lesson_service.list_summaries(),
    )
    return jsonify(dump_model(payload)), 200

@app.route('/api/lessons/categories', methods=['GET'])
def list_lesson_categories():
    return jsonify(dump_models(lesson_service.list_categories())), 200

@app.route('/api/lessons/<lesson_id>', methods=['GET'])
def get_lesson(lesson_id):
    lesson = lesson_service.get_detail(lesson_id)
    if lesson is None:
        return jsonify(error_body("Lesson not found")), 404
    return jsonify(dump_model(lesson)), 200


if __name__ == '__main__':
    app.logger.info(f"FinLearn API listening on port {PORT} (env={APP_ENV})")
    app.run(host='0.0.0.0', port=PORT)
