"""
Static reference data for the dashboard: the choices offered by the form,
the mock series behind the analytics charts and the UI strings.
"""

import pandas as pd

DISTRICTS = [
    "Angul", "Balangir", "Balasore", "Bargarh", "Bhadrak", "Boudh",
    "Cuttack", "Deogarh", "Dhenkanal", "Gajapati", "Ganjam", "Jagatsinghpur",
    "Jajpur", "Jharsuguda", "Kalahandi", "Kandhamal", "Kendrapara", "Keonjhar",
    "Khordha", "Koraput", "Malkangiri", "Mayurbhanj", "Nabarangpur", "Nayagarh",
    "Nuapada", "Puri", "Rayagada", "Sambalpur", "Subarnapur", "Sundargarh",
]

# season -> crops grown in it
CROPS = {
    "Kharif": ["Rice", "Maize", "Ragi", "Arhar/Tur", "Moong(Green Gram)", "Groundnut", "Cotton(lint)", "Jute"],
    "Rabi": ["Wheat", "Gram", "Rapeseed &Mustard", "Potato", "Onion", "Sunflower"],
    "Autumn": ["Rice", "Maize"],
    "Summer": ["Rice", "Moong(Green Gram)", "Groundnut", "Sesamum"],
    "Winter": ["Rice"],
    "Whole Year": ["Sugarcane", "Banana", "Coconut", "Turmeric"],
}

SEASONS = list(CROPS)


def crops_for(season: str) -> list:
    return CROPS.get(season, [])


# -----------------------------
# Mock chart series (illustrative only, not from any dataset)
# -----------------------------
YIELD_DATA = pd.DataFrame({
    "name": ["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
    "yield": [2.4, 2.8, 3.1, 2.9, 3.4, 3.8],
})

SOIL_DATA = pd.DataFrame({
    "name": ["Field A", "Field B", "Field C", "Field D", "Field E"],
    "pH": [6.2, 6.8, 5.9, 7.1, 6.5],
})

WEATHER_DATA = pd.DataFrame({
    "name": ["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
    "rainfall": [12, 18, 25, 40, 95, 210],
})


# -----------------------------
# UI strings
# -----------------------------
I18N = {
    "en": {
        "predictionForm": "Crop Yield Prediction",
        "district": "District",
        "year": "Year",
        "season": "Season",
        "crop": "Crop",
        "area": "Area",
        "getYield": "Get Yield Prediction",
        "yieldUnit": "tons/ha",
        "comparativeYield": "Comparative Yield",
        "predictedYield": "Predicted Yield Trend",
        "soilPH": "Soil pH Levels",
        "rainfallPatterns": "Rainfall Patterns",
    },
    "hi": {
        "predictionForm": "फसल उपज पूर्वानुमान",
        "district": "जिला",
        "year": "वर्ष",
        "season": "मौसम",
        "crop": "फसल",
        "area": "क्षेत्रफल",
        "getYield": "उपज पूर्वानुमान प्राप्त करें",
        "yieldUnit": "टन/हेक्टेयर",
        "comparativeYield": "तुलनात्मक उपज",
        "predictedYield": "अनुमानित उपज प्रवृत्ति",
        "soilPH": "मिट्टी का pH स्तर",
        "rainfallPatterns": "वर्षा पैटर्न",
    },
}

LANGUAGES = {"en": "English", "hi": "हिन्दी"}


def strings(language: str) -> dict:
    """UI strings for a language, falling back to English key by key."""
    return {**I18N["en"], **I18N.get(language, {})}
