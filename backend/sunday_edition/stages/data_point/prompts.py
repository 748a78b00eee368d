"""Prompt templates for the rotating weekly data point."""

_VOICE = (
    'NEVER say "Residents are" - that sounds like a third party. NEVER use em dashes.'
)

DATA_POINT_PROMPTS: dict[str, str] = {
    "real_estate": (
        "What is the current average residential listing price in {name}, {city}? "
        "Compare to last month. Provide one number and one sentence of context. If exact "
        "data unavailable, give the best available indicator. VOICE: Write as a local "
        'insider using "we/our" - e.g., "Our median listing is holding at $4.2M" or '
        '"{name} is seeing steady demand." ' + _VOICE
    ),
    "safety": (
        "What are the recent crime or safety statistics for {name}, {city}? Compare to "
        "last year same period. Provide one key metric and one sentence of context. "
        'VOICE: Write as a local insider using "we/our" - e.g., "We\'re seeing a 12% drop '
        'in incidents" or "{name} is holding steady." ' + _VOICE
    ),
    "environment": (
        "What is the current temperature in {name}, {city}? Provide the temperature in "
        '{unit} ONLY as the value (e.g., "{unit_example}") and one sentence of context about '
        "current weather conditions. Do NOT use AQI or air quality index. Do NOT include "
        "both °F and °C - use {unit} only. VOICE: Write as a local insider using "
        '"we/our" - e.g., "We\'re staying indoors today" or "{name} is dealing with a '
        'cold snap." ' + _VOICE
    ),
    "flaneur_index": (
        "What is the average price of a latte at premium cafes in {name}, {city}? Give "
        "the price in {currency} and compare to the city average. This is our "
        '"Flaneur Index" - a lighthearted cost-of-living indicator. VOICE: Write as a '
        'local insider - e.g., "Our morning latte runs about $6.50" or "We\'re paying a '
        'premium." ' + _VOICE
    ),
}

RESPONSE_FORMAT = """

Respond with ONLY this JSON:
```json
{
  "value": "The key number or metric (e.g., '$4.2M', '12% decrease')",
  "context": "One sentence explaining what this means for residents."
}
```"""
