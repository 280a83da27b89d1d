# backend-services/finlearn-api/catalog/lessons.py
"""
Static lesson catalog (Thai content with English titles).
"""
import logging
from collections import Counter
from typing import List, NamedTuple, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from shared.contracts import LessonCategory, LessonDetail

logger = logging.getLogger(__name__)


class LessonCatalog(NamedTuple):
    lessons: Tuple[LessonDetail, ...]
    categories: Tuple[LessonCategory, ...]


class DuplicateLessonIdError(ValueError):
    """Raised when two lessons share an id."""
    pass


_CATEGORIES = [
    {"id": "basics", "name": "พื้นฐานการลงทุน", "nameEn": "Investing Basics", "icon": "🌱"},
    {"id": "fundamental", "name": "การวิเคราะห์ปัจจัยพื้นฐาน", "nameEn": "Fundamental Analysis", "icon": "📊"},
    {"id": "technical", "name": "การวิเคราะห์ทางเทคนิค", "nameEn": "Technical Analysis", "icon": "📈"},
    {"id": "strategy", "name": "กลยุทธ์และการจัดการความเสี่ยง", "nameEn": "Strategy & Risk", "icon": "🛡️"},
]

_LESSONS = [
    {
        "id": "what-is-stock",
        "title": "หุ้นคืออะไร?",
        "titleEn": "What Is a Stock?",
        "description": "ทำความรู้จักหุ้น การเป็นเจ้าของบริษัท และที่มาของผลตอบแทน",
        "category": "basics",
        "difficulty": "beginner",
        "duration": 5,
        "icon": "🏢",
        "sections": [
            {
                "heading": "หุ้น = ส่วนหนึ่งของบริษัท",
                "content": (
                    "เมื่อคุณซื้อหุ้น คุณกำลังซื้อความเป็นเจ้าของส่วนหนึ่งของบริษัทนั้น\n\n"
                    "ถ้าบริษัทเติบโตและทำกำไรได้มากขึ้น มูลค่าของหุ้นก็มีแนวโน้มเพิ่มขึ้นตาม"
                ),
            },
            {
                "heading": "ผลตอบแทนมาจากไหน",
                "content": (
                    "ผลตอบแทนจากหุ้นมี 2 ทางหลัก คือ ส่วนต่างราคา (Capital Gain) "
                    "และเงินปันผล (Dividend)\n\n"
                    "บางบริษัทไม่จ่ายปันผลเพราะนำกำไรไปลงทุนต่อเพื่อการเติบโต"
                ),
            },
            {
                "heading": "ตลาดหุ้นทำงานอย่างไร",
                "content": (
                    "ตลาดหุ้นเป็นที่ที่ผู้ซื้อและผู้ขายมาพบกัน ราคาหุ้นเปลี่ยนแปลงตามอุปสงค์และอุปทาน\n\n"
                    "ในสหรัฐฯ ตลาดหลักคือ NYSE และ NASDAQ"
                ),
            },
        ],
        "keyTakeaways": [
            "หุ้นคือความเป็นเจ้าของส่วนหนึ่งของบริษัท",
            "ผลตอบแทนมาจากส่วนต่างราคาและเงินปันผล",
            "ราคาหุ้นขึ้นลงตามอุปสงค์และอุปทาน",
        ],
        "quiz": [
            {
                "question": "เมื่อซื้อหุ้น คุณได้อะไร?",
                "options": ["เงินกู้ให้บริษัท", "ความเป็นเจ้าของส่วนหนึ่งของบริษัท", "สินค้าของบริษัท", "ตำแหน่งในบริษัท"],
                "answer": 1,
            },
            {
                "question": "ข้อใดไม่ใช่ที่มาของผลตอบแทนจากหุ้น?",
                "options": ["ส่วนต่างราคา", "เงินปันผล", "ดอกเบี้ยเงินฝาก"],
                "answer": 2,
            },
        ],
    },
    {
        "id": "risk-and-return",
        "title": "ความเสี่ยงและผลตอบแทน",
        "titleEn": "Risk and Return",
        "description": "ทำไมผลตอบแทนสูงมักมาพร้อมความเสี่ยงสูง และจะประเมินความเสี่ยงของตัวเองอย่างไร",
        "category": "basics",
        "difficulty": "beginner",
        "duration": 6,
        "icon": "⚖️",
        "sections": [
            {
                "heading": "ความเสี่ยงคืออะไร",
                "content": (
                    "ความเสี่ยงคือโอกาสที่ผลลัพธ์จะไม่เป็นไปตามที่คาดไว้ รวมถึงโอกาสขาดทุน\n\n"
                    "หุ้นที่ราคาผันผวนมากถือว่ามีความเสี่ยงสูง"
                ),
            },
            {
                "heading": "รู้จักระดับความเสี่ยงที่รับได้",
                "content": (
                    "ก่อนลงทุนควรถามตัวเองว่า ถ้าพอร์ตลดลง 20% จะยังนอนหลับได้หรือไม่\n\n"
                    "ระยะเวลาลงทุนที่ยาวขึ้นช่วยให้รับความผันผวนได้มากขึ้น"
                ),
            },
        ],
        "keyTakeaways": [
            "ผลตอบแทนที่สูงขึ้นมักมาพร้อมความเสี่ยงที่สูงขึ้น",
            "ควรลงทุนในระดับความเสี่ยงที่ตัวเองรับได้",
        ],
        "quiz": [
            {
                "question": "หุ้นที่ราคาผันผวนมากมักมีลักษณะอย่างไร?",
                "options": ["ความเสี่ยงต่ำ", "ความเสี่ยงสูง", "ไม่มีความเสี่ยง"],
                "answer": 1,
            },
        ],
    },
    {
        "id": "pe-ratio",
        "title": "P/E Ratio คืออะไร? ทำไมสำคัญ",
        "titleEn": "Understanding the P/E Ratio",
        "description": "ใช้ P/E เพื่อดูว่าหุ้นแพงหรือถูกเมื่อเทียบกับกำไร",
        "category": "fundamental",
        "difficulty": "beginner",
        "duration": 8,
        "icon": "🧮",
        "sections": [
            {
                "heading": "สูตรของ P/E",
                "content": (
                    "P/E = ราคาหุ้น ÷ กำไรต่อหุ้น (EPS)\n\n"
                    "ถ้าหุ้นราคา 100 บาท และ EPS เท่ากับ 5 บาท P/E จะเท่ากับ 20 เท่า "
                    "หมายความว่านักลงทุนยอมจ่าย 20 บาทเพื่อกำไร 1 บาท"
                ),
            },
            {
                "heading": "P/E สูงหรือต่ำดีกว่า?",
                "content": (
                    "P/E ต่ำอาจหมายถึงหุ้นราคาถูก หรือบริษัทมีปัญหา\n\n"
                    "P/E สูงอาจหมายถึงตลาดคาดหวังการเติบโตสูง หรือหุ้นแพงเกินไป"
                ),
            },
            {
                "heading": "เปรียบเทียบกับอุตสาหกรรม",
                "content": (
                    "ควรเปรียบเทียบ P/E กับบริษัทในอุตสาหกรรมเดียวกันเสมอ "
                    "เพราะแต่ละอุตสาหกรรมมีค่าเฉลี่ยต่างกันมาก"
                ),
            },
        ],
        "keyTakeaways": [
            "P/E = ราคา ÷ EPS",
            "ต้องเทียบ P/E กับค่าเฉลี่ยอุตสาหกรรม",
            "P/E ต่ำไม่ได้แปลว่าถูกเสมอไป",
        ],
        "quiz": [
            {
                "question": "หุ้นราคา 50 บาท EPS 5 บาท มี P/E เท่าไร?",
                "options": ["5 เท่า", "10 เท่า", "25 เท่า", "250 เท่า"],
                "answer": 1,
            },
            {
                "question": "ควรเปรียบเทียบ P/E กับอะไร?",
                "options": ["ราคาทองคำ", "บริษัทในอุตสาหกรรมเดียวกัน", "อัตราแลกเปลี่ยน"],
                "answer": 1,
            },
        ],
    },
    {
        "id": "financial-statements",
        "title": "วิธีอ่านงบการเงินเบื้องต้น",
        "titleEn": "Reading Financial Statements",
        "description": "งบกำไรขาดทุน งบดุล และงบกระแสเงินสด บอกอะไรเราบ้าง",
        "category": "fundamental",
        "difficulty": "intermediate",
        "duration": 12,
        "icon": "📑",
        "sections": [
            {
                "heading": "งบกำไรขาดทุน (Income Statement)",
                "content": (
                    "แสดงรายได้ ค่าใช้จ่าย และกำไรในช่วงเวลาหนึ่ง\n\n"
                    "ดูแนวโน้มรายได้และอัตรากำไรสุทธิ (Net Profit Margin) ย้อนหลังหลายปี"
                ),
            },
            {
                "heading": "งบดุล (Balance Sheet)",
                "content": (
                    "แสดงสินทรัพย์ หนี้สิน และส่วนของผู้ถือหุ้น ณ วันใดวันหนึ่ง\n\n"
                    "สินทรัพย์ = หนี้สิน + ส่วนของผู้ถือหุ้น"
                ),
            },
            {
                "heading": "งบกระแสเงินสด (Cash Flow)",
                "content": (
                    "แสดงเงินสดที่เข้าออกจากการดำเนินงาน การลงทุน และการจัดหาเงิน\n\n"
                    "บริษัทที่ดีควรมีกระแสเงินสดจากการดำเนินงานเป็นบวกอย่างสม่ำเสมอ"
                ),
            },
        ],
        "keyTakeaways": [
            "งบกำไรขาดทุนบอกความสามารถในการทำกำไร",
            "งบดุลบอกฐานะทางการเงิน",
            "งบกระแสเงินสดบอกว่าเงินสดมาจากไหนและไปไหน",
        ],
        "quiz": [
            {
                "question": "สมการของงบดุลคือข้อใด?",
                "options": [
                    "สินทรัพย์ = หนี้สิน + ส่วนของผู้ถือหุ้น",
                    "รายได้ = กำไร + ค่าใช้จ่าย",
                    "เงินสด = รายได้ - หนี้สิน",
                ],
                "answer": 0,
            },
        ],
    },
    {
        "id": "dividends",
        "title": "เงินปันผลคืออะไร? วิธีประเมินหุ้นปันผล",
        "titleEn": "Dividends and Dividend Yield",
        "description": "เข้าใจเงินปันผล อัตราผลตอบแทนปันผล และวันสำคัญที่ต้องรู้",
        "category": "fundamental",
        "difficulty": "beginner",
        "duration": 7,
        "icon": "💰",
        "sections": [
            {
                "heading": "เงินปันผลคืออะไร",
                "content": (
                    "เงินปันผลคือส่วนแบ่งกำไรที่บริษัทจ่ายคืนให้ผู้ถือหุ้น\n\n"
                    "บริษัทที่มั่นคงมักจ่ายปันผลสม่ำเสมอทุกไตรมาสหรือทุกปี"
                ),
            },
            {
                "heading": "Dividend Yield",
                "content": (
                    "Dividend Yield = เงินปันผลต่อหุ้นต่อปี ÷ ราคาหุ้น × 100\n\n"
                    "Yield ที่สูงผิดปกติอาจเป็นสัญญาณว่าราคาหุ้นร่วงลงมาก ควรตรวจสอบเหตุผล"
                ),
            },
            {
                "heading": "วัน XD",
                "content": "ถ้าซื้อหุ้นในหรือหลังวัน XD (Ex-Dividend) คุณจะไม่ได้รับปันผลรอบนั้น",
            },
        ],
        "keyTakeaways": [
            "ปันผลคือส่วนแบ่งกำไรที่จ่ายให้ผู้ถือหุ้น",
            "Yield สูงผิดปกติควรตรวจสอบก่อนลงทุน",
            "ต้องถือหุ้นก่อนวัน XD จึงจะได้ปันผล",
        ],
        "quiz": [
            {
                "question": "หุ้นราคา 100 บาท จ่ายปันผลปีละ 4 บาท Dividend Yield เท่าไร?",
                "options": ["0.4%", "4%", "25%", "40%"],
                "answer": 1,
            },
        ],
    },
    {
        "id": "moving-averages",
        "title": "เส้นค่าเฉลี่ยเคลื่อนที่ (Moving Average)",
        "titleEn": "Moving Averages",
        "description": "ใช้ MA50 และ MA200 ดูแนวโน้มราคาในระยะกลางและระยะยาว",
        "category": "technical",
        "difficulty": "intermediate",
        "duration": 9,
        "icon": "〰️",
        "sections": [
            {
                "heading": "MA คืออะไร",
                "content": (
                    "Moving Average คือค่าเฉลี่ยราคาปิดย้อนหลังตามจำนวนวันที่กำหนด เช่น 50 วัน หรือ 200 วัน\n\n"
                    "ช่วยลดความผันผวนรายวันให้เห็นแนวโน้มชัดขึ้น"
                ),
            },
            {
                "heading": "ราคาอยู่เหนือหรือใต้เส้น",
                "content": (
                    "ราคาอยู่เหนือ MA200 มักถือว่าเป็นแนวโน้มขาขึ้นระยะยาว\n\n"
                    "Golden Cross คือเมื่อ MA50 ตัดขึ้นเหนือ MA200"
                ),
            },
        ],
        "keyTakeaways": [
            "MA ช่วยให้เห็นแนวโน้มราคา",
            "ราคาเหนือ MA200 เป็นสัญญาณขาขึ้นระยะยาว",
        ],
        "quiz": [
            {
                "question": "Golden Cross คืออะไร?",
                "options": ["MA50 ตัดลงใต้ MA200", "MA50 ตัดขึ้นเหนือ MA200", "ราคาเท่ากับ MA50"],
                "answer": 1,
            },
        ],
    },
    {
        "id": "rsi",
        "title": "RSI: ซื้อมากไปหรือขายมากไป",
        "titleEn": "Relative Strength Index",
        "description": "อ่านค่า RSI เพื่อดูภาวะ Overbought และ Oversold",
        "category": "technical",
        "difficulty": "advanced",
        "duration": 10,
        "icon": "🌡️",
        "sections": [
            {
                "heading": "RSI วัดอะไร",
                "content": (
                    "RSI วัดความแรงของการขึ้นลงของราคาในช่วง 14 วัน มีค่าระหว่าง 0 ถึง 100\n\n"
                    "RSI มากกว่า 70 ถือว่า Overbought ส่วนต่ำกว่า 30 ถือว่า Oversold"
                ),
            },
            {
                "heading": "ข้อควรระวัง",
                "content": "ในแนวโน้มที่แข็งแรง RSI อาจอยู่ในโซน Overbought ได้นาน อย่าใช้ RSI เพียงตัวเดียว",
            },
        ],
        "keyTakeaways": [
            "RSI > 70 = Overbought, RSI < 30 = Oversold",
            "ควรใช้ร่วมกับเครื่องมืออื่น",
        ],
        "quiz": [
            {
                "question": "RSI เท่ากับ 25 หมายถึงอะไร?",
                "options": ["Overbought", "Oversold", "เป็นกลาง"],
                "answer": 1,
            },
        ],
    },
    {
        "id": "diversification",
        "title": "การกระจายความเสี่ยง",
        "titleEn": "Diversification",
        "description": "อย่าใส่ไข่ทั้งหมดไว้ในตะกร้าใบเดียว จัดพอร์ตให้สมดุล",
        "category": "strategy",
        "difficulty": "beginner",
        "duration": 6,
        "icon": "🧺",
        "sections": [
            {
                "heading": "ทำไมต้องกระจายความเสี่ยง",
                "content": (
                    "ถ้าถือหุ้นตัวเดียวแล้วบริษัทมีปัญหา พอร์ตทั้งหมดจะเสียหายหนัก\n\n"
                    "การถือหลายบริษัทหลายอุตสาหกรรมช่วยลดผลกระทบจากบริษัทใดบริษัทหนึ่ง"
                ),
            },
            {
                "heading": "วิธีง่ายๆ สำหรับมือใหม่",
                "content": "กองทุนดัชนี เช่น S&P 500 ช่วยให้กระจายการลงทุนไปยังหลายร้อยบริษัทได้ในครั้งเดียว",
            },
        ],
        "keyTakeaways": [
            "กระจายการลงทุนหลายบริษัทและหลายอุตสาหกรรม",
            "กองทุนดัชนีเป็นทางเลือกที่ง่ายสำหรับมือใหม่",
        ],
        "quiz": [],
    },
    {
        "id": "dollar-cost-averaging",
        "title": "ลงทุนแบบถัวเฉลี่ย (DCA)",
        "titleEn": "Dollar-Cost Averaging",
        "description": "ลงทุนเป็นประจำด้วยจำนวนเงินเท่ากัน ไม่ต้องจับจังหวะตลาด",
        "category": "strategy",
        "difficulty": "intermediate",
        "duration": 7,
        "icon": "📅",
        "sections": [
            {
                "heading": "DCA คืออะไร",
                "content": (
                    "DCA คือการลงทุนด้วยจำนวนเงินเท่าๆ กันในทุกช่วงเวลา เช่น ทุกเดือน\n\n"
                    "เมื่อราคาต่ำจะได้หุ้นมากขึ้น เมื่อราคาสูงจะได้หุ้นน้อยลง"
                ),
            },
            {
                "heading": "ข้อดีและข้อจำกัด",
                "content": (
                    "ช่วยลดความเสี่ยงจากการซื้อที่จุดสูงสุดและสร้างวินัยการลงทุน\n\n"
                    "ในตลาดขาขึ้นต่อเนื่อง การลงทุนก้อนเดียวอาจได้ผลตอบแทนมากกว่า"
                ),
            },
        ],
        "keyTakeaways": [
            "DCA ไม่ต้องจับจังหวะตลาด",
            "เหมาะกับการลงทุนระยะยาวและสร้างวินัย",
        ],
        "quiz": [
            {
                "question": "เมื่อราคาหุ้นลดลง การลงทุนแบบ DCA จะได้หุ้นอย่างไร?",
                "options": ["น้อยลง", "เท่าเดิม", "มากขึ้น"],
                "answer": 2,
            },
        ],
    },
]


def _count_by_category(lessons: List[LessonDetail]) -> Counter:
    return Counter(lesson.category for lesson in lessons)


def build_lesson_catalog(raw_lessons: Optional[List[dict]] = None,
                         raw_categories: Optional[List[dict]] = None) -> LessonCatalog:
    """
    Validates the lesson content and derives per-category lesson counts.
    Defaults to the bundled content when no raw documents are given.

    Raises:
        ValidationError: If a lesson or category violates its contract
            (empty sections, quiz answer out of range, ...).
        DuplicateLessonIdError: If two lessons share an id.
    """
    try:
        lessons = TypeAdapter(List[LessonDetail]).validate_python(_LESSONS if raw_lessons is None else raw_lessons)
    except ValidationError as e:
        logger.critical(f"Lesson catalog failed contract validation: {e}")
        raise

    seen = set()
    for lesson in lessons:
        if lesson.id in seen:
            raise DuplicateLessonIdError(f"Duplicate lesson id '{lesson.id}'")
        seen.add(lesson.id)

    category_docs = _CATEGORIES if raw_categories is None else raw_categories
    counts = _count_by_category(lessons)
    known = {c["id"] for c in category_docs}
    orphans = set(counts) - known
    if orphans:
        logger.warning(f"Lessons reference unknown categories: {sorted(orphans)}")

    categories = tuple(
        LessonCategory(**category, lessonCount=counts.get(category["id"], 0))
        for category in category_docs
    )
    logger.info(f"Lesson catalog built with {len(lessons)} lessons in {len(categories)} categories.")
    return LessonCatalog(lessons=tuple(lessons), categories=categories)
