# backend-services/finlearn-api/tests/conftest.py
"""
Pytest configuration and shared fixtures for finlearn-api tests
Centralizes the Flask test client, catalog fixtures and shared constants
"""

import os
import sys
from datetime import date
from typing import Any, Dict

import pytest

# Ensure local imports resolve when running from repo root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

# No rotating log file during tests; must be set before app is imported
os.environ.setdefault("LOG_DIR", "")

# -------------------------------------------------------------------
# Constants shared across tests
# -------------------------------------------------------------------

AS_OF = date(2026, 1, 15)

@pytest.fixture(scope="session")
def test_constants() -> Dict[str, Any]:
    return {
        "POPULAR": ["AAPL", "GOOGL", "MSFT", "TSLA", "AMZN"],
        "SEARCH_ENTRY_COUNT": 10,
        "LESSON_COUNT": 9,
        "CATEGORY_IDS": ["basics", "fundamental", "technical", "strategy"],
        "SP500_COUNT": 40,
        "SP500_MAX_LIMIT": 100,
        "SUMMARY_KEYS": {
            "id", "title", "titleEn", "description", "category",
            "difficulty", "duration", "icon", "keyTakeaways",
        },
        "CARD_KEYS": {
            "symbol", "name", "logo", "sector", "price", "change",
            "changePercent", "marketCap", "overallScore",
        },
    }

# -------------------------------------------------------------------
# Flask app and client fixtures
# -------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    from app import app as flask_app
    flask_app.config["TESTING"] = True
    yield flask_app

@pytest.fixture
def client(app):
    return app.test_client()

# -------------------------------------------------------------------
# Catalog and service fixtures (built independently of the app module)
# -------------------------------------------------------------------

@pytest.fixture(scope="session")
def stock_catalog():
    from catalog.stocks import build_stock_catalog
    return build_stock_catalog(as_of=AS_OF, history_days=30)

@pytest.fixture(scope="session")
def search_entries():
    from catalog.stocks import build_search_entries
    return build_search_entries()

@pytest.fixture(scope="session")
def stock_service(stock_catalog, search_entries):
    from catalog.stocks import POPULAR_SYMBOLS
    from services.stock_service import StockLookupService
    return StockLookupService(stock_catalog, search_entries, POPULAR_SYMBOLS)

@pytest.fixture(scope="session")
def lesson_catalog():
    from catalog.lessons import build_lesson_catalog
    return build_lesson_catalog()

@pytest.fixture(scope="session")
def lesson_service(lesson_catalog):
    from services.lesson_service import LessonService
    return LessonService(lesson_catalog)

@pytest.fixture(scope="session")
def sp500_directory():
    from catalog.sp500 import build_sp500_frame
    from services.sp500_service import Sp500Directory
    return Sp500Directory(build_sp500_frame())

# -------------------------------------------------------------------
# Raw lesson document factory
# -------------------------------------------------------------------

@pytest.fixture
def make_lesson():
    def _make(lesson_id: str = "sample", **overrides) -> Dict[str, Any]:
        doc = {
            "id": lesson_id,
            "title": "ตัวอย่าง",
            "titleEn": "Sample",
            "description": "บทเรียนตัวอย่าง",
            "category": "basics",
            "difficulty": "beginner",
            "duration": 3,
            "icon": "📘",
            "sections": [{"heading": "หัวข้อ", "content": "เนื้อหา"}],
            "keyTakeaways": ["สรุป"],
            "quiz": [{"question": "คำถาม?", "options": ["ก", "ข"], "answer": 0}],
        }
        doc.update(overrides)
        return doc
    return _make
