# backend-services/shared/contracts.py
"""
This module defines the Pydantic models that serve as the formal data contracts
for the FinLearn API.

These models ensure data consistency, provide automatic validation, and act as
living documentation for the JSON payloads the frontend consumes. Field names
are camelCase because they are the wire names.
"""

from typing import List, Literal, Optional, TypeAlias
from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_SYMBOL_LEN = 10
SP500_MAX_LIMIT = 100
SP500_DEFAULT_LIMIT = 50

# --- Contract 1: Company profile ---
class CompanyProfile(BaseModel):
    """Beginner-facing company profile. `description` is Thai, `descriptionEn` English."""
    name: str
    symbol: str
    logo: str
    description: str
    descriptionEn: str
    sector: str
    industry: str
    exchange: str = "NASDAQ"
    marketCap: float
    marketCapLabel: str
    employees: int
    founded: str
    headquarters: str
    website: str
    ceo: str


# --- Contract 2: Price data ---
class PricePoint(BaseModel):
    """Represents a single daily bar of the price history."""
    date: str
    open: float
    high: float
    low: float
    close: float
    volume: int

class PriceData(BaseModel):
    current: float
    previousClose: float
    change: float
    changePercent: float
    high: float
    low: float
    open: float
    volume: int
    avgVolume: int
    week52High: float
    week52Low: float
    history: List[PricePoint] = Field(default_factory=list)


# --- Contract 3: Key metrics ---
class YearValue(BaseModel):
    year: str
    value: float

class KeyMetrics(BaseModel):
    """Value, strength and growth metrics shown on the stock page."""
    # Value
    pe: Optional[float] = None
    peIndustryAvg: Optional[float] = None
    pb: Optional[float] = None
    dividendYield: Optional[float] = None
    dividendPerShare: Optional[float] = None

    # Strength
    revenue: Optional[float] = None
    revenueGrowth: float
    netIncome: Optional[float] = None
    profitMargin: float
    debtToEquity: float
    currentRatio: float
    roe: float

    # Growth
    eps: float
    epsGrowth: float
    revenueHistory: List[YearValue] = Field(default_factory=list)
    epsHistory: List[YearValue] = Field(default_factory=list)


# --- Contract 4: Financial statements ---
class IncomeStatement(BaseModel):
    revenue: float
    costOfRevenue: float
    grossProfit: float
    operatingExpenses: float
    operatingIncome: float
    netIncome: float

class BalanceSheet(BaseModel):
    totalAssets: float
    currentAssets: float
    nonCurrentAssets: float
    totalLiabilities: float
    currentLiabilities: float
    nonCurrentLiabilities: float
    totalEquity: float

class CashFlow(BaseModel):
    operating: float
    investing: float
    financing: float
    netCashFlow: float

class FinancialStatements(BaseModel):
    """
    Latest annual statements. A statement set to None means the data is not
    available; a present statement with zero values means the values are zero.
    """
    incomeStatement: Optional[IncomeStatement] = None
    balanceSheet: Optional[BalanceSheet] = None
    cashFlow: Optional[CashFlow] = None


# --- Contract 5: News and calendar ---
class NewsItem(BaseModel):
    id: str
    title: str
    summary: str
    source: str
    date: str
    url: str
    sentiment: Literal['positive', 'negative', 'neutral']

class EventItem(BaseModel):
    id: str
    title: str
    date: str
    type: Literal['earnings', 'dividend', 'split', 'other']
    description: str


# --- Contract 6: Trading signals ---
class TechnicalSignals(BaseModel):
    ma50: Literal['above', 'below']
    ma200: Literal['above', 'below']
    rsi: float
    rsiSignal: Literal['overbought', 'oversold', 'neutral']
    macd: Literal['bullish', 'bearish', 'neutral']
    overallScore: int = Field(..., ge=0, le=100)

class FundamentalSignals(BaseModel):
    earningsGrowth: Literal['positive', 'negative', 'flat']
    peVsAvg: Literal['undervalued', 'overvalued', 'fair']
    cashPosition: Literal['strong', 'moderate', 'weak']
    debtLevel: Literal['low', 'moderate', 'high']
    overallScore: int = Field(..., ge=0, le=100)

class SignalSummary(BaseModel):
    """Percent split of the beginner recommendation gauge."""
    longTermInvest: int
    waitForTiming: int
    notRecommended: int

class TradingSignals(BaseModel):
    technical: TechnicalSignals
    fundamental: FundamentalSignals
    summary: SignalSummary


# --- Contract 7: Competitors, scores, tips ---
class CompetitorData(BaseModel):
    symbol: str
    name: str
    marketCap: float
    pe: Optional[float] = None
    profitMargin: float
    revenueGrowth: float
    dividendYield: Optional[float] = None

class ScoreDimensions(BaseModel):
    value: float = Field(..., ge=0, le=5)
    growth: float = Field(..., ge=0, le=5)
    strength: float = Field(..., ge=0, le=5)
    dividend: float = Field(..., ge=0, le=5)
    risk: float = Field(..., ge=0, le=5)  # higher = lower risk

class ScoreRating(BaseModel):
    overall: float = Field(..., ge=0, le=5)
    dimensions: ScoreDimensions

class RelatedLesson(BaseModel):
    title: str
    url: str

class BeginnerTips(BaseModel):
    goodFor: List[str]
    cautionFor: List[str]
    relatedLessons: List[RelatedLesson]


# --- Contract 8: StockRecord ---
class StockRecord(BaseModel):
    """The full stock page payload served by GET /api/stocks/<symbol>."""
    symbol: str = Field(..., min_length=1, max_length=MAX_SYMBOL_LEN)
    profile: CompanyProfile
    price: PriceData
    keyMetrics: KeyMetrics
    financials: FinancialStatements
    news: List[NewsItem] = Field(default_factory=list)
    events: List[EventItem] = Field(default_factory=list)
    signals: TradingSignals
    competitors: List[CompetitorData] = Field(default_factory=list)
    scores: ScoreRating
    beginnerTips: BeginnerTips

    @model_validator(mode='after')
    def _symbol_is_canonical(self):
        if self.symbol != self.symbol.upper():
            raise ValueError(f"symbol '{self.symbol}' must be uppercase")
        if self.profile.symbol != self.symbol:
            raise ValueError(f"profile.symbol '{self.profile.symbol}' does not match '{self.symbol}'")
        return self


# --- Contract 9: Search and cards ---
class SearchResultEntry(BaseModel):
    """Lightweight projection used by search/autocomplete."""
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    sector: str
    exchange: str
    logo: Optional[str] = None

SearchResultList: TypeAlias = List[SearchResultEntry]

class PopularStockCard(BaseModel):
    """Summary shape rendered by the stock cards on the home page."""
    symbol: str
    name: str
    logo: str
    sector: str
    price: float
    change: float
    changePercent: float
    marketCap: float
    overallScore: float

    @classmethod
    def from_record(cls, record: StockRecord) -> "PopularStockCard":
        return cls(
            symbol=record.symbol,
            name=record.profile.name,
            logo=record.profile.logo,
            sector=record.profile.sector,
            price=record.price.current,
            change=record.price.change,
            changePercent=record.price.changePercent,
            marketCap=record.profile.marketCap,
            overallScore=record.scores.overall,
        )


# --- Contract 10: S&P 500 directory ---
class Sp500Constituent(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    sector: str
    exchange: str

class Sp500Page(BaseModel):
    """One page of the S&P 500 listing. `total` counts the filtered set."""
    stocks: List[Sp500Constituent]
    total: int
    sectors: List[str]
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1, le=SP500_MAX_LIMIT)


# --- Contract 11: Lessons ---
Difficulty: TypeAlias = Literal['beginner', 'intermediate', 'advanced']

class LessonSection(BaseModel):
    heading: str
    content: str

class QuizQuestion(BaseModel):
    question: str
    options: List[str] = Field(..., min_length=2)
    answer: int

    @model_validator(mode='after')
    def _answer_in_range(self):
        if not 0 <= self.answer < len(self.options):
            raise ValueError(
                f"answer index {self.answer} is out of range for {len(self.options)} options"
            )
        return self

class LessonSummary(BaseModel):
    """Lesson card data for GET /api/lessons. Carries no body content."""
    id: str
    title: str
    titleEn: str
    description: str
    category: str
    difficulty: Difficulty
    duration: int = Field(..., gt=0, description="Estimated reading time in minutes")
    icon: str
    keyTakeaways: List[str] = Field(default_factory=list)

class LessonDetail(BaseModel):
    """Full lesson served by GET /api/lessons/<id>."""
    id: str
    title: str
    titleEn: str
    description: str
    category: str
    difficulty: Difficulty
    duration: int = Field(..., gt=0)
    icon: str
    keyTakeaways: List[str] = Field(default_factory=list)
    sections: List[LessonSection] = Field(..., min_length=1)
    quiz: List[QuizQuestion] = Field(default_factory=list)

    def to_summary(self) -> LessonSummary:
        return LessonSummary(
            id=self.id,
            title=self.title,
            titleEn=self.titleEn,
            description=self.description,
            category=self.category,
            difficulty=self.difficulty,
            duration=self.duration,
            icon=self.icon,
            keyTakeaways=list(self.keyTakeaways),
        )

class LessonCategory(BaseModel):
    id: str
    name: str
    nameEn: str
    icon: str
    lessonCount: int = Field(..., ge=0)

class LessonIndexResponse(BaseModel):
    categories: List[LessonCategory]
    lessons: List[LessonSummary]


# --- Contract 12: Service responses ---
class HealthStatus(BaseModel):
    status: Literal['ok']
    message: str
    timestamp: str
    version: str

class ApiError(BaseModel):
    """Error body shared by every failing route."""
    error: str
    message: Optional[str] = None
