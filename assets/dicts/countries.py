# Countries the blog can publish a recipe for.
# Keys must match the country part of a post title exactly ("France | Ratatouille").
# Codes are ISO alpha-2 and must match the ISO_A2 property of the world geometry.
# Posts for countries that are not listed here never show up on the map, so add
# a row here before publishing a recipe for a new country.

countries_data = {
    # Caribbean
    "Jamaica": {"code": "JM", "cuisine": "Caribbean", "flag": "🇯🇲"},
    "Cuba": {"code": "CU", "cuisine": "Caribbean", "flag": "🇨🇺"},
    "Haiti": {"code": "HT", "cuisine": "Caribbean", "flag": "🇭🇹"},
    "Trinidad and Tobago": {"code": "TT", "cuisine": "Caribbean", "flag": "🇹🇹"},

    # Pacific
    "Samoa": {"code": "WS", "cuisine": "Pacific", "flag": "🇼🇸"},
    "Fiji": {"code": "FJ", "cuisine": "Pacific", "flag": "🇫🇯"},
    "New Zealand": {"code": "NZ", "cuisine": "Pacific", "flag": "🇳🇿"},
    "Australia": {"code": "AU", "cuisine": "Pacific", "flag": "🇦🇺"},

    # Europe
    "France": {"code": "FR", "cuisine": "European", "flag": "🇫🇷"},
    "Italy": {"code": "IT", "cuisine": "European", "flag": "🇮🇹"},
    "Spain": {"code": "ES", "cuisine": "European", "flag": "🇪🇸"},
    "Greece": {"code": "GR", "cuisine": "European", "flag": "🇬🇷"},
    "Germany": {"code": "DE", "cuisine": "European", "flag": "🇩🇪"},
    "Norway": {"code": "NO", "cuisine": "European", "flag": "🇳🇴"},

    # South America
    "Brazil": {"code": "BR", "cuisine": "South American", "flag": "🇧🇷"},
    "Peru": {"code": "PE", "cuisine": "South American", "flag": "🇵🇪"},
    "Argentina": {"code": "AR", "cuisine": "South American", "flag": "🇦🇷"},
    "Colombia": {"code": "CO", "cuisine": "South American", "flag": "🇨🇴"},

    # North and Central America
    "Mexico": {"code": "MX", "cuisine": "Central American", "flag": "🇲🇽"},
    "Guatemala": {"code": "GT", "cuisine": "Central American", "flag": "🇬🇹"},
    "Canada": {"code": "CA", "cuisine": "North American", "flag": "🇨🇦"},

    # Africa
    "Ethiopia": {"code": "ET", "cuisine": "East African", "flag": "🇪🇹"},
    "Morocco": {"code": "MA", "cuisine": "North African", "flag": "🇲🇦"},
    "Nigeria": {"code": "NG", "cuisine": "West African", "flag": "🇳🇬"},
    "Senegal": {"code": "SN", "cuisine": "West African", "flag": "🇸🇳"},

    # Asia
    "India": {"code": "IN", "cuisine": "South Asian", "flag": "🇮🇳"},
    "Japan": {"code": "JP", "cuisine": "East Asian", "flag": "🇯🇵"},
    "Thailand": {"code": "TH", "cuisine": "Southeast Asian", "flag": "🇹🇭"},
    "Vietnam": {"code": "VN", "cuisine": "Southeast Asian", "flag": "🇻🇳"},
    "Lebanon": {"code": "LB", "cuisine": "Middle Eastern", "flag": "🇱🇧"},
}
