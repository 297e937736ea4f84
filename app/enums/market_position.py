from enum import Enum

class MarketPosition(str, Enum):
    strong = "strong"
    moderate = "moderate"
    weak = "weak"
