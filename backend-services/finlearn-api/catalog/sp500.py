# backend-services/finlearn-api/catalog/sp500.py
"""
Bundled sample of S&P 500 constituents for the directory listing.
"""
import logging

import pandas as pd
from pydantic import TypeAdapter

from shared.contracts import Sp500Constituent

logger = logging.getLogger(__name__)

SP500_COLUMNS = ["symbol", "name", "sector", "exchange"]

_CONSTITUENTS = [
    ("AAPL", "Apple Inc.", "Information Technology", "NASDAQ"),
    ("MSFT", "Microsoft Corporation", "Information Technology", "NASDAQ"),
    ("NVDA", "NVIDIA Corporation", "Information Technology", "NASDAQ"),
    ("AVGO", "Broadcom Inc.", "Information Technology", "NASDAQ"),
    ("ORCL", "Oracle Corporation", "Information Technology", "NYSE"),
    ("CRM", "Salesforce, Inc.", "Information Technology", "NYSE"),
    ("ADBE", "Adobe Inc.", "Information Technology", "NASDAQ"),
    ("GOOGL", "Alphabet Inc. Class A", "Communication Services", "NASDAQ"),
    ("META", "Meta Platforms, Inc.", "Communication Services", "NASDAQ"),
    ("NFLX", "Netflix, Inc.", "Communication Services", "NASDAQ"),
    ("DIS", "The Walt Disney Company", "Communication Services", "NYSE"),
    ("AMZN", "Amazon.com, Inc.", "Consumer Discretionary", "NASDAQ"),
    ("TSLA", "Tesla, Inc.", "Consumer Discretionary", "NASDAQ"),
    ("HD", "The Home Depot, Inc.", "Consumer Discretionary", "NYSE"),
    ("MCD", "McDonald's Corporation", "Consumer Discretionary", "NYSE"),
    ("NKE", "NIKE, Inc.", "Consumer Discretionary", "NYSE"),
    ("WMT", "Walmart Inc.", "Consumer Staples", "NYSE"),
    ("PG", "The Procter & Gamble Company", "Consumer Staples", "NYSE"),
    ("KO", "The Coca-Cola Company", "Consumer Staples", "NYSE"),
    ("PEP", "PepsiCo, Inc.", "Consumer Staples", "NASDAQ"),
    ("COST", "Costco Wholesale Corporation", "Consumer Staples", "NASDAQ"),
    ("JPM", "JPMorgan Chase & Co.", "Financials", "NYSE"),
    ("BAC", "Bank of America Corporation", "Financials", "NYSE"),
    ("V", "Visa Inc.", "Financials", "NYSE"),
    ("MA", "Mastercard Incorporated", "Financials", "NYSE"),
    ("GS", "The Goldman Sachs Group, Inc.", "Financials", "NYSE"),
    ("BRK.B", "Berkshire Hathaway Inc. Class B", "Financials", "NYSE"),
    ("JNJ", "Johnson & Johnson", "Health Care", "NYSE"),
    ("UNH", "UnitedHealth Group Incorporated", "Health Care", "NYSE"),
    ("LLY", "Eli Lilly and Company", "Health Care", "NYSE"),
    ("PFE", "Pfizer Inc.", "Health Care", "NYSE"),
    ("MRK", "Merck & Co., Inc.", "Health Care", "NYSE"),
    ("XOM", "Exxon Mobil Corporation", "Energy", "NYSE"),
    ("CVX", "Chevron Corporation", "Energy", "NYSE"),
    ("CAT", "Caterpillar Inc.", "Industrials", "NYSE"),
    ("BA", "The Boeing Company", "Industrials", "NYSE"),
    ("UPS", "United Parcel Service, Inc.", "Industrials", "NYSE"),
    ("LIN", "Linde plc", "Materials", "NASDAQ"),
    ("NEE", "NextEra Energy, Inc.", "Utilities", "NYSE"),
    ("PLD", "Prologis, Inc.", "Real Estate", "NYSE"),
]


def build_sp500_frame() -> pd.DataFrame:
    """
    Returns the constituents as a DataFrame sorted by symbol, with a fresh
    RangeIndex. Rows are validated against Sp500Constituent first.
    """
    records = [dict(zip(SP500_COLUMNS, row)) for row in _CONSTITUENTS]
    TypeAdapter(list[Sp500Constituent]).validate_python(records)

    frame = pd.DataFrame(records, columns=SP500_COLUMNS)
    duplicated = frame["symbol"][frame["symbol"].duplicated()].tolist()
    if duplicated:
        raise ValueError(f"Duplicate S&P 500 symbols in bundled data: {duplicated}")

    frame = frame.sort_values("symbol", kind="stable").reset_index(drop=True)
    logger.info(f"S&P 500 directory loaded with {len(frame)} constituents.")
    return frame
