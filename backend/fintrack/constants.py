"""Fixed lookup tables shared by validation, storage and formatting."""

CATEGORIES = (
    "Food", "Transportation", "Shopping", "Bills", "Utilities",
    "Health", "Entertainment", "Travel", "Education", "Other",
    "Salary", "Bonus",
)

# code -> (name, symbol)
CURRENCIES = {
    "USD": ("US Dollar", "$"),
    "EUR": ("Euro", "€"),
    "GBP": ("British Pound", "£"),
    "JPY": ("Japanese Yen", "¥"),
    "CAD": ("Canadian Dollar", "C$"),
    "LKR": ("Sri Lankan Rupee", "Rs"),
}

# Currencies displayed without minor units
ZERO_DECIMAL_CURRENCIES = ("JPY",)

LANGUAGES = {
    "en": "English",
    "es": "Español",
    "fr": "Français",
    "de": "Deutsch",
    "it": "Italiano",
    "ja": "日本語",
    "si": "සිංහල",
}

DEFAULT_GOAL_COLOR = "#007aff"
