"""Hand-maintained dates for lunar, Islamic, Hebrew and Hindu holidays.

Each table maps year -> (month, day) in the Gregorian calendar. Extend the
tables before 2031; years outside them are treated as unknown.
"""

# First day of the first lunar month (Chinese calendar)
LUNAR_NEW_YEAR = {
    2024: (2, 10),
    2025: (1, 29),
    2026: (2, 17),
    2027: (2, 6),
    2028: (1, 26),
    2029: (2, 13),
    2030: (2, 3),
}

# 15th day of the 8th lunar month; also Tsukimi (Jugoya) in Japan
MID_AUTUMN = {
    2024: (9, 17),
    2025: (10, 6),
    2026: (9, 25),
    2027: (9, 15),
    2028: (10, 3),
    2029: (9, 22),
    2030: (9, 12),
}

# Rangwali Holi, full moon of Phalguna
HOLI = {
    2024: (3, 25),
    2025: (3, 14),
    2026: (3, 4),
    2027: (3, 22),
    2028: (3, 11),
    2029: (3, 1),
    2030: (3, 20),
}

# Lakshmi Puja day, Kartika amavasya
DIWALI = {
    2024: (11, 1),
    2025: (10, 20),
    2026: (11, 8),
    2027: (10, 29),
    2028: (10, 17),
    2029: (11, 5),
    2030: (10, 26),
}

# 1 Shawwal; expected dates, moon sighting can shift these by a day
EID_AL_FITR = {
    2024: (4, 10),
    2025: (3, 30),
    2026: (3, 20),
    2027: (3, 10),
    2028: (2, 27),
    2029: (2, 15),
    2030: (2, 5),
}

# 1 Tishrei (festival begins the previous evening)
ROSH_HASHANAH = {
    2024: (10, 3),
    2025: (9, 23),
    2026: (9, 12),
    2027: (10, 2),
    2028: (9, 21),
    2029: (9, 10),
    2030: (9, 28),
}

# 25 Kislev, first full day
HANUKKAH = {
    2024: (12, 26),
    2025: (12, 15),
    2026: (12, 5),
    2027: (12, 25),
    2028: (12, 13),
    2029: (12, 2),
    2030: (12, 21),
}
