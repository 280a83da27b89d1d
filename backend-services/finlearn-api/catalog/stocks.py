# backend-services/finlearn-api/catalog/stocks.py
"""
Static demo stock catalog.

Builds the symbol -> StockRecord mapping and the search entries once, validates
every record against shared.contracts, and hands back read-only containers.
"""
import copy
import logging
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from shared.contracts import SearchResultEntry, StockRecord
from catalog.price_history import generate_price_history

logger = logging.getLogger(__name__)

POPULAR_SYMBOLS: Tuple[str, ...] = ("AAPL", "GOOGL", "MSFT", "TSLA", "AMZN")

_RELATED_LESSONS = [
    {"title": "P/E Ratio คืออะไร? ทำไมสำคัญ", "url": "/learn/pe-ratio"},
    {"title": "เงินปันผลคืออะไร? วิธีประเมินหุ้นปันผล", "url": "/learn/dividends"},
    {"title": "วิธีอ่านงบการเงินเบื้องต้น", "url": "/learn/financial-statements"},
]


def market_cap_label(market_cap: float) -> str:
    """Beginner-friendly size bucket for a market capitalisation in USD."""
    if market_cap >= 200e9:
        return "🏢 บริษัทขนาดใหญ่มาก (Mega Cap)"
    if market_cap >= 10e9:
        return "🏢 บริษัทขนาดใหญ่ (Large Cap)"
    if market_cap >= 2e9:
        return "🏢 บริษัทขนาดกลาง (Mid Cap)"
    if market_cap >= 300e6:
        return "🏢 บริษัทขนาดเล็ก (Small Cap)"
    return "🏢 บริษัทขนาดจิ๋ว (Micro Cap)"


_AAPL: Dict[str, Any] = {
    "symbol": "AAPL",
    "profile": {
        "name": "Apple Inc.",
        "symbol": "AAPL",
        "logo": "https://logo.clearbit.com/apple.com",
        "description": (
            "Apple เป็นบริษัทเทคโนโลยีที่ใหญ่ที่สุดในโลก ผลิต iPhone, iPad, Mac "
            "และบริการดิจิทัลต่างๆ เช่น App Store, Apple Music, iCloud "
            "ถ้าคุณเคยใช้ iPhone ก็คือลูกค้าของบริษัทนี้! Apple มีรายได้หลักจากการขาย iPhone "
            "และบริการ (Services) ซึ่งกำลังเติบโตอย่างรวดเร็ว"
        ),
        "descriptionEn": (
            "Apple designs, manufactures, and markets smartphones, personal computers, "
            "tablets, wearables, and accessories worldwide."
        ),
        "sector": "เทคโนโลยี",
        "industry": "Consumer Electronics",
        "exchange": "NASDAQ",
        "marketCap": 3_450_000_000_000,
        "employees": 164_000,
        "founded": "1976",
        "headquarters": "Cupertino, California, USA",
        "website": "https://apple.com",
        "ceo": "Tim Cook",
    },
    "price": {
        "current": 231.34,
        "previousClose": 228.87,
        "change": 2.47,
        "changePercent": 1.08,
        "high": 232.15,
        "low": 228.50,
        "open": 229.10,
        "volume": 62_345_000,
        "avgVolume": 54_000_000,
        "week52High": 260.10,
        "week52Low": 164.08,
    },
    "keyMetrics": {
        "pe": 31.2,
        "peIndustryAvg": 28.5,
        "pb": 48.7,
        "dividendYield": 0.52,
        "dividendPerShare": 0.96,
        "revenue": 383_285_000_000,
        "revenueGrowth": 2.1,
        "netIncome": 96_995_000_000,
        "profitMargin": 25.31,
        "debtToEquity": 176.3,
        "currentRatio": 0.99,
        "roe": 160.6,
        "eps": 6.42,
        "epsGrowth": 10.3,
        "revenueHistory": [
            {"year": "2020", "value": 274_515_000_000},
            {"year": "2021", "value": 365_817_000_000},
            {"year": "2022", "value": 394_328_000_000},
            {"year": "2023", "value": 383_285_000_000},
            {"year": "2024", "value": 391_035_000_000},
        ],
        "epsHistory": [
            {"year": "2020", "value": 3.28},
            {"year": "2021", "value": 5.61},
            {"year": "2022", "value": 6.11},
            {"year": "2023", "value": 6.42},
            {"year": "2024", "value": 7.08},
        ],
    },
    "financials": {
        "incomeStatement": {
            "revenue": 383_285_000_000,
            "costOfRevenue": 214_137_000_000,
            "grossProfit": 169_148_000_000,
            "operatingExpenses": 54_847_000_000,
            "operatingIncome": 114_301_000_000,
            "netIncome": 96_995_000_000,
        },
        "balanceSheet": {
            "totalAssets": 352_583_000_000,
            "currentAssets": 143_566_000_000,
            "nonCurrentAssets": 209_017_000_000,
            "totalLiabilities": 290_437_000_000,
            "currentLiabilities": 145_308_000_000,
            "nonCurrentLiabilities": 145_129_000_000,
            "totalEquity": 62_146_000_000,
        },
        "cashFlow": {
            "operating": 110_543_000_000,
            "investing": -7_077_000_000,
            "financing": -108_488_000_000,
            "netCashFlow": -5_022_000_000,
        },
    },
    "news": [
        {
            "id": "1",
            "title": "Apple เปิดตัว Vision Pro 2 ราคาถูกลง 40%",
            "summary": "Apple ประกาศเปิดตัว Vision Pro รุ่นใหม่ในราคาที่เข้าถึงง่ายขึ้น คาดว่าจะกระตุ้นยอดขายได้มากขึ้น",
            "source": "Bloomberg",
            "date": "2026-02-12",
            "url": "#",
            "sentiment": "positive",
        },
        {
            "id": "2",
            "title": "รายได้จาก Services ของ Apple ทำสถิติสูงสุดใหม่",
            "summary": "รายได้จากบริการของ Apple ทะลุ 25 พันล้านดอลลาร์ต่อไตรมาส สูงสุดเป็นประวัติการณ์",
            "source": "CNBC",
            "date": "2026-02-10",
            "url": "#",
            "sentiment": "positive",
        },
        {
            "id": "3",
            "title": "Apple AI ยังตามหลังคู่แข่งด้าน Generative AI",
            "summary": "นักวิเคราะห์มองว่า Apple Intelligence ยังตามหลัง Google และ Microsoft ในด้าน AI",
            "source": "Reuters",
            "date": "2026-02-08",
            "url": "#",
            "sentiment": "negative",
        },
        {
            "id": "4",
            "title": "iPhone 17 จะมีหน้าจอพับได้",
            "summary": "ลือหนาหูว่า Apple กำลังพัฒนา iPhone จอพับสำหรับปี 2027",
            "source": "MacRumors",
            "date": "2026-02-05",
            "url": "#",
            "sentiment": "neutral",
        },
    ],
    "events": [
        {
            "id": "1",
            "title": "ประกาศผลกำไร Q1 2026",
            "date": "2026-04-24",
            "type": "earnings",
            "description": "Apple จะประกาศผลกำไรไตรมาส 1 ปี 2026",
        },
        {
            "id": "2",
            "title": "จ่ายเงินปันผล",
            "date": "2026-05-15",
            "type": "dividend",
            "description": "จ่ายเงินปันผล $0.24 ต่อหุ้น",
        },
    ],
    "signals": {
        "technical": {
            "ma50": "above",
            "ma200": "above",
            "rsi": 58,
            "rsiSignal": "neutral",
            "macd": "bullish",
            "overallScore": 72,
        },
        "fundamental": {
            "earningsGrowth": "positive",
            "peVsAvg": "overvalued",
            "cashPosition": "strong",
            "debtLevel": "moderate",
            "overallScore": 68,
        },
        "summary": {"longTermInvest": 65, "waitForTiming": 25, "notRecommended": 10},
    },
    "competitors": [
        {"symbol": "MSFT", "name": "Microsoft", "marketCap": 3_100_000_000_000, "pe": 36.8, "profitMargin": 36.4, "revenueGrowth": 15.7, "dividendYield": 0.73},
        {"symbol": "GOOGL", "name": "Alphabet (Google)", "marketCap": 2_100_000_000_000, "pe": 27.3, "profitMargin": 24.0, "revenueGrowth": 12.4, "dividendYield": None},
        {"symbol": "AMZN", "name": "Amazon", "marketCap": 1_900_000_000_000, "pe": 62.5, "profitMargin": 7.1, "revenueGrowth": 11.8, "dividendYield": None},
        {"symbol": "META", "name": "Meta Platforms", "marketCap": 1_400_000_000_000, "pe": 25.8, "profitMargin": 28.6, "revenueGrowth": 22.1, "dividendYield": 0.36},
    ],
    "scores": {
        "overall": 4.2,
        "dimensions": {"value": 3.5, "growth": 4.0, "strength": 4.8, "dividend": 2.5, "risk": 4.2},
    },
    "beginnerTips": {
        "goodFor": [
            "💎 คุณต้องการลงทุนในบริษัทที่มั่นคงระยะยาว",
            "📱 คุณเชื่อว่า iPhone และ Services จะยังคงเติบโต",
            "💰 คุณต้องการหุ้นที่จ่ายเงินปันผลสม่ำเสมอ",
            "🛡️ คุณต้องการหุ้นที่มีความเสี่ยงต่ำ-ปานกลาง",
        ],
        "cautionFor": [
            "📈 P/E สูงกว่าค่าเฉลี่ยอุตสาหกรรม อาจแพงเกินไป",
            "🤖 Apple ยังตามหลังคู่แข่งด้าน AI",
            "📉 การเติบโตของรายได้ชะลอตัว (เพียง 2.1%)",
            "💳 หนี้ต่อทุนสูง (176%) แม้จะจัดการได้ดี",
        ],
        "relatedLessons": _RELATED_LESSONS,
    },
}

# Stocks below share AAPL's signal template. Statements, news, events and
# revenue/EPS history are not available for them, so they are left empty/None
# instead of borrowing Apple's figures.
_NO_STATEMENTS = {"incomeStatement": None, "balanceSheet": None, "cashFlow": None}

_DERIVED: Dict[str, Dict[str, Any]] = {
    "GOOGL": {
        "volatility": 0.028,
        "profile": {
            "name": "Alphabet Inc. (Google)",
            "logo": "https://logo.clearbit.com/google.com",
            "description": (
                "Google เป็นบริษัทที่ทำ Search Engine ที่ใหญ่ที่สุดในโลก รวมถึง YouTube, Android, "
                "Google Cloud, Gmail และอีกมากมาย รายได้หลักมาจากการโฆษณาออนไลน์ "
                "และกำลังลงทุนหนักในด้าน AI (Gemini)"
            ),
            "descriptionEn": "Alphabet operates Google Search, YouTube, Android, Google Cloud and other businesses.",
            "industry": "Internet Content & Information",
            "marketCap": 2_100_000_000_000,
            "employees": 182_502,
            "founded": "1998",
            "headquarters": "Mountain View, California, USA",
            "website": "https://abc.xyz",
            "ceo": "Sundar Pichai",
        },
        "price": {
            "current": 176.45, "previousClose": 174.89, "change": 1.56, "changePercent": 0.89,
            "week52High": 193.31, "week52Low": 130.67,
        },
        "keyMetrics": {
            "pe": 27.3, "peIndustryAvg": 25.0, "pb": 7.1, "dividendYield": None, "dividendPerShare": None,
            "revenue": 307_394_000_000, "revenueGrowth": 12.4, "netIncome": 73_795_000_000,
            "profitMargin": 24.0, "eps": 5.80, "epsGrowth": 35.2,
        },
        "competitors": [
            {"symbol": "MSFT", "name": "Microsoft", "marketCap": 3_100_000_000_000, "pe": 36.8, "profitMargin": 36.4, "revenueGrowth": 15.7, "dividendYield": 0.73},
            {"symbol": "META", "name": "Meta Platforms", "marketCap": 1_400_000_000_000, "pe": 25.8, "profitMargin": 28.6, "revenueGrowth": 22.1, "dividendYield": 0.36},
            {"symbol": "AMZN", "name": "Amazon", "marketCap": 1_900_000_000_000, "pe": 62.5, "profitMargin": 7.1, "revenueGrowth": 11.8, "dividendYield": None},
        ],
        "scores": {"overall": 4.5, "dimensions": {"value": 4.0, "growth": 5.0, "strength": 4.5, "dividend": 1.0, "risk": 3.8}},
        "beginnerTips": {
            "goodFor": [
                "🤖 คุณเชื่อในอนาคตของ AI และเทคโนโลยี",
                "📈 คุณต้องการหุ้นที่มีการเติบโตสูง",
                "💡 คุณชอบบริษัทที่มีนวัตกรรมตลอดเวลา",
            ],
            "cautionFor": [
                "💰 ไม่จ่ายเงินปันผล ไม่เหมาะกับคนต้องการรายได้ประจำ",
                "⚖️ กำลังเผชิญคดีต่อต้านการผูกขาด",
                "📊 รายได้พึ่งพาโฆษณาเป็นหลัก",
            ],
        },
    },
    "MSFT": {
        "volatility": 0.022,
        "profile": {
            "name": "Microsoft Corporation",
            "logo": "https://logo.clearbit.com/microsoft.com",
            "description": (
                "Microsoft คือบริษัทซอฟต์แวร์ยักษ์ใหญ่ ผู้สร้าง Windows, Office, Azure (Cloud), Xbox "
                "และ LinkedIn รายได้หลักมาจาก Cloud (Azure) ที่กำลังเติบโตอย่างรวดเร็ว "
                "และเป็นผู้นำด้าน AI ผ่านการร่วมมือกับ OpenAI"
            ),
            "descriptionEn": "Microsoft develops software, cloud services (Azure), devices and gaming products.",
            "industry": "Software - Infrastructure",
            "marketCap": 3_100_000_000_000,
            "employees": 228_000,
            "founded": "1975",
            "headquarters": "Redmond, Washington, USA",
            "website": "https://microsoft.com",
            "ceo": "Satya Nadella",
        },
        "price": {
            "current": 417.88, "previousClose": 415.20, "change": 2.68, "changePercent": 0.65,
            "week52High": 468.35, "week52Low": 362.90,
        },
        "keyMetrics": {
            "pe": 36.8, "peIndustryAvg": 32.0, "pb": 13.2, "dividendYield": 0.73, "dividendPerShare": 3.00,
            "revenue": 236_584_000_000, "revenueGrowth": 15.7, "netIncome": 86_143_000_000,
            "profitMargin": 36.4, "eps": 11.54, "epsGrowth": 22.8,
        },
        "competitors": [
            {"symbol": "AAPL", "name": "Apple", "marketCap": 3_450_000_000_000, "pe": 31.2, "profitMargin": 25.31, "revenueGrowth": 2.1, "dividendYield": 0.52},
            {"symbol": "GOOGL", "name": "Alphabet (Google)", "marketCap": 2_100_000_000_000, "pe": 27.3, "profitMargin": 24.0, "revenueGrowth": 12.4, "dividendYield": None},
            {"symbol": "AMZN", "name": "Amazon", "marketCap": 1_900_000_000_000, "pe": 62.5, "profitMargin": 7.1, "revenueGrowth": 11.8, "dividendYield": None},
        ],
        "scores": {"overall": 4.6, "dimensions": {"value": 3.8, "growth": 4.8, "strength": 5.0, "dividend": 3.0, "risk": 4.5}},
        "beginnerTips": {
            "goodFor": [
                "☁️ คุณเชื่อในอนาคตของ Cloud Computing",
                "🤖 คุณต้องการลงทุนในบริษัทที่เป็นผู้นำ AI",
                "💰 ต้องการหุ้นที่จ่ายปันผลและยังเติบโตได้",
                "🛡️ ต้องการหุ้นที่มั่นคง แข็งแกร่ง",
            ],
            "cautionFor": [
                "📈 P/E สูงกว่าค่าเฉลี่ย ราคาอาจแพง",
                "🏢 ขนาดใหญ่มาก การเติบโตก้าวกระโดดยาก",
            ],
        },
    },
    "TSLA": {
        "volatility": 0.045,
        "profile": {
            "name": "Tesla, Inc.",
            "logo": "https://logo.clearbit.com/tesla.com",
            "description": (
                "Tesla คือบริษัทรถยนต์ไฟฟ้าอันดับ 1 ของโลก ผลิตรถ Model S, 3, X, Y และ Cybertruck "
                "นอกจากนี้ยังทำ Solar Panels, Powerwall (แบตเตอรี่บ้าน) "
                "และกำลังพัฒนา Full Self-Driving (รถขับเอง) CEO คือ Elon Musk"
            ),
            "descriptionEn": "Tesla designs and sells electric vehicles and energy generation and storage systems.",
            "sector": "ยานยนต์",
            "industry": "Auto Manufacturers",
            "marketCap": 800_000_000_000,
            "employees": 140_473,
            "founded": "2003",
            "headquarters": "Austin, Texas, USA",
            "website": "https://tesla.com",
            "ceo": "Elon Musk",
        },
        "price": {
            "current": 248.42, "previousClose": 253.10, "change": -4.68, "changePercent": -1.85,
            "week52High": 361.93, "week52Low": 138.80,
        },
        "keyMetrics": {
            "pe": 72.5, "peIndustryAvg": 15.0, "pb": 16.8, "dividendYield": None, "dividendPerShare": None,
            "revenue": 96_773_000_000, "revenueGrowth": 8.2, "netIncome": 14_974_000_000,
            "profitMargin": 15.5, "eps": 4.31, "epsGrowth": -12.5,
        },
        "competitors": [],
        "scores": {"overall": 3.2, "dimensions": {"value": 1.5, "growth": 3.5, "strength": 3.0, "dividend": 0.5, "risk": 2.0}},
        "beginnerTips": {
            "goodFor": [
                "⚡ คุณเชื่อในอนาคตของรถยนต์ไฟฟ้า",
                "🚀 คุณรับความเสี่ยงสูงได้ เพื่อโอกาสผลตอบแทนสูง",
                "🤖 คุณสนใจ AI และ Full Self-Driving",
            ],
            "cautionFor": [
                "📈 P/E สูงมาก (72.5 vs อุตสาหกรรม 15) แพงมาก!",
                "📉 กำไรลดลง -12.5% ในปีล่าสุด",
                "🎢 หุ้นผันผวนสูงมาก ราคาขึ้นลงรุนแรง",
                "👤 ขึ้นอยู่กับ Elon Musk มากเกินไป",
            ],
        },
    },
    "AMZN": {
        "volatility": 0.030,
        "profile": {
            "name": "Amazon.com, Inc.",
            "logo": "https://logo.clearbit.com/amazon.com",
            "description": (
                "Amazon คือบริษัท E-commerce ที่ใหญ่ที่สุดในโลก คุณสั่งของออนไลน์ผ่าน Amazon ได้เกือบทุกอย่าง "
                "นอกจากนี้ Amazon Web Services (AWS) คือบริการ Cloud อันดับ 1 ของโลก "
                "และยังมี Prime Video, Alexa อีกด้วย"
            ),
            "descriptionEn": "Amazon operates online retail, Amazon Web Services, advertising and subscription businesses.",
            "industry": "Internet Retail",
            "marketCap": 1_900_000_000_000,
            "employees": 1_525_000,
            "founded": "1994",
            "headquarters": "Seattle, Washington, USA",
            "website": "https://amazon.com",
            "ceo": "Andy Jassy",
        },
        "price": {
            "current": 186.21, "previousClose": 184.55, "change": 1.66, "changePercent": 0.90,
            "week52High": 201.20, "week52Low": 151.61,
        },
        "keyMetrics": {
            "pe": 62.5, "peIndustryAvg": 30.0, "pb": 8.4, "dividendYield": None, "dividendPerShare": None,
            "revenue": 574_785_000_000, "revenueGrowth": 11.8, "netIncome": 40_828_000_000,
            "profitMargin": 7.1, "eps": 3.98, "epsGrowth": 93.2,
        },
        "competitors": [
            {"symbol": "WMT", "name": "Walmart", "marketCap": 700_000_000_000, "pe": 38.0, "profitMargin": 2.9, "revenueGrowth": 5.1, "dividendYield": 1.0},
            {"symbol": "MSFT", "name": "Microsoft", "marketCap": 3_100_000_000_000, "pe": 36.8, "profitMargin": 36.4, "revenueGrowth": 15.7, "dividendYield": 0.73},
        ],
        "scores": {"overall": 4.0, "dimensions": {"value": 2.5, "growth": 4.5, "strength": 4.0, "dividend": 0.5, "risk": 3.5}},
        "beginnerTips": {
            "goodFor": [
                "☁️ คุณเชื่อในอนาคตของ Cloud (AWS)",
                "🛒 คุณเชื่อว่า E-commerce จะเติบโตต่อ",
                "📈 กำไรเพิ่มขึ้น 93% กำลังฟื้นตัว",
            ],
            "cautionFor": [
                "📈 P/E สูงมาก (62.5) ราคาแพง",
                "💰 ไม่จ่ายเงินปันผล",
                "📊 Profit Margin ต่ำ (7.1%) เมื่อเทียบกับคู่แข่ง",
            ],
        },
    },
}

_SEARCH_ENTRIES = [
    {"symbol": "AAPL", "name": "Apple Inc.", "sector": "เทคโนโลยี", "exchange": "NASDAQ", "logo": "https://logo.clearbit.com/apple.com"},
    {"symbol": "GOOGL", "name": "Alphabet Inc.", "sector": "เทคโนโลยี", "exchange": "NASDAQ", "logo": "https://logo.clearbit.com/google.com"},
    {"symbol": "MSFT", "name": "Microsoft Corporation", "sector": "เทคโนโลยี", "exchange": "NASDAQ", "logo": "https://logo.clearbit.com/microsoft.com"},
    {"symbol": "TSLA", "name": "Tesla, Inc.", "sector": "ยานยนต์", "exchange": "NASDAQ", "logo": "https://logo.clearbit.com/tesla.com"},
    {"symbol": "AMZN", "name": "Amazon.com, Inc.", "sector": "เทคโนโลยี", "exchange": "NASDAQ", "logo": "https://logo.clearbit.com/amazon.com"},
    {"symbol": "NVDA", "name": "NVIDIA Corporation", "sector": "เทคโนโลยี", "exchange": "NASDAQ"},
    {"symbol": "META", "name": "Meta Platforms", "sector": "เทคโนโลยี", "exchange": "NASDAQ"},
    {"symbol": "JPM", "name": "JPMorgan Chase", "sector": "การเงิน", "exchange": "NYSE"},
    {"symbol": "JNJ", "name": "Johnson & Johnson", "sector": "สุขภาพ", "exchange": "NYSE"},
    {"symbol": "WMT", "name": "Walmart Inc.", "sector": "ค้าปลีก", "exchange": "NYSE"},
]


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlays `overrides` on a deep copy of `base`. Lists are replaced, not merged."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _raw_stock_documents() -> Dict[str, Dict[str, Any]]:
    """Raw catalog documents in display order, before history and validation."""
    documents = {"AAPL": copy.deepcopy(_AAPL)}
    for symbol, overlay in _DERIVED.items():
        overrides = {k: v for k, v in overlay.items() if k != "volatility"}
        overrides["symbol"] = symbol
        overrides.setdefault("profile", {})["symbol"] = symbol
        doc = _merge(_AAPL, overrides)
        doc["financials"] = dict(_NO_STATEMENTS)
        doc["news"] = []
        doc["events"] = []
        doc["keyMetrics"]["revenueHistory"] = []
        doc["keyMetrics"]["epsHistory"] = []
        documents[symbol] = doc
    return documents


def _volatility_for(symbol: str) -> float:
    return _DERIVED.get(symbol, {}).get("volatility", 0.025)


def build_stock_catalog(as_of: Optional[date] = None, history_days: int = 365) -> Mapping[str, StockRecord]:
    """
    Builds the read-only symbol -> StockRecord catalog.

    Raises:
        ValidationError: If any document violates the StockRecord contract.
    """
    catalog: Dict[str, StockRecord] = {}
    for symbol, doc in _raw_stock_documents().items():
        doc["profile"]["marketCapLabel"] = market_cap_label(doc["profile"]["marketCap"])
        doc["price"]["history"] = generate_price_history(
            symbol,
            doc["price"]["current"],
            days=history_days,
            volatility=_volatility_for(symbol),
            as_of=as_of,
        )
        try:
            catalog[symbol] = StockRecord.model_validate(doc)
        except ValidationError as e:
            logger.critical(f"Stock catalog entry {symbol} failed contract validation: {e}")
            raise
    logger.info(f"Stock catalog built with {len(catalog)} records.")
    return MappingProxyType(catalog)


def build_search_entries() -> Tuple[SearchResultEntry, ...]:
    """Search/autocomplete entries in display order."""
    entries = TypeAdapter(Tuple[SearchResultEntry, ...]).validate_python(_SEARCH_ENTRIES)
    logger.info(f"Search index built with {len(entries)} entries.")
    return entries
