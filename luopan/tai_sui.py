"""
Tai Sui (太歲) conflict computation.

Handles:
- Zodiac sign of a year (year branch)
- The five ways a sign offends the year's Grand Duke:
  值 (Value), 沖 (Clash), 害 (Harm), 刑 (Punish), 破 (Break)
- Birth years of the people born under an affected sign

Design principle: the relation tables are kept as given. Harm and Break
are total (every sign has a partner); Punish is partial, the four
self-punishing signs have no entry at all.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


# ============================================================
# ZODIAC SIGNS
# ============================================================

@dataclass(frozen=True)
class ZodiacSign:
    chinese: str
    branch: str
    pinyin: str
    animal: str
    index: int  # 0-11, Rat first

    def __str__(self):
        return f"{self.chinese} ({self.animal})"


ZODIACS = [
    ZodiacSign("鼠", "子", "Zi", "Rat", 0),
    ZodiacSign("牛", "丑", "Chou", "Ox", 1),
    ZodiacSign("虎", "寅", "Yin", "Tiger", 2),
    ZodiacSign("兔", "卯", "Mao", "Rabbit", 3),
    ZodiacSign("龍", "辰", "Chen", "Dragon", 4),
    ZodiacSign("蛇", "巳", "Si", "Snake", 5),
    ZodiacSign("馬", "午", "Wu", "Horse", 6),
    ZodiacSign("羊", "未", "Wei", "Goat", 7),
    ZodiacSign("猴", "申", "Shen", "Monkey", 8),
    ZodiacSign("雞", "酉", "You", "Rooster", 9),
    ZodiacSign("狗", "戌", "Xu", "Dog", 10),
    ZodiacSign("豬", "亥", "Hai", "Pig", 11),
]

# Simplified glyphs accepted as input
_SIMPLIFIED = {"龙": 4, "马": 6, "鸡": 9, "猪": 11}

_SIGN_TOKENS = {}
for _sign in ZODIACS:
    for _token in (_sign.chinese, _sign.branch, _sign.pinyin.lower(), _sign.animal.lower()):
        _SIGN_TOKENS[_token] = _sign
for _token, _idx in _SIMPLIFIED.items():
    _SIGN_TOKENS[_token] = ZODIACS[_idx]
del _sign, _token, _idx


def zodiac_index(year: int) -> int:
    """Zodiac index of a year: (year - 4) mod 12, Rat = 0."""
    return ((year - 4) % 12 + 12) % 12


def zodiac_for_year(year: int) -> ZodiacSign:
    return ZODIACS[zodiac_index(year)]


def zodiac_sign(token: Union[ZodiacSign, str]) -> ZodiacSign:
    """
    Resolve a sign token.

    Accepts a ZodiacSign, its glyph (龍, or simplified 龙), its earthly
    branch (辰), pinyin (Chen) or English animal (Dragon).
    """
    if isinstance(token, ZodiacSign):
        return token
    sign = _SIGN_TOKENS.get(str(token).strip().lower())
    if sign is None:
        raise ValueError(f"Unknown zodiac sign {token!r}")
    return sign


# ============================================================
# CONFLICT RELATIONS
# ============================================================

class ConflictKind(Enum):
    VALUE = "值太歲"
    CLASH = "沖太歲"
    HARM = "害太歲"
    PUNISH = "刑太歲"
    BREAK = "破太歲"

    @property
    def description(self) -> str:
        return CONFLICT_NOTES[self][0]

    @property
    def remedy(self) -> str:
        return CONFLICT_NOTES[self][1]


# kind: (description, remedy)
CONFLICT_NOTES = {
    ConflictKind.VALUE: ("運程反覆，易生變化，情緒起伏大，宜靜不宜動。",
                         "佩戴紅繩、化太歲錦囊，或本命佛飾品。"),
    ConflictKind.CLASH: ("衝擊最大，多勞少得，易有轉職、搬遷或受傷之象。",
                         "佩戴生肖三合/六合飾物 (如鼠沖馬，鼠戴牛/猴/龍)。"),
    ConflictKind.HARM: ("易犯小人，人際關係受損，遭人陷害或誤解。",
                        "佩戴紫水晶或黑曜石，遠離口舌。"),
    ConflictKind.PUNISH: ("是非較多，易有官非口舌，或肢體刑傷。",
                          "佩戴貴人生肖飾品，多行善積德。"),
    ConflictKind.BREAK: ("運氣易有突然破壞，破財或人際關係破裂。",
                         "佩戴白水晶或金屬飾品增強氣場。"),
}

# Six Harms (六害), symmetric
SIX_HARMS = [
    (0, 7),   # Rat-Goat
    (1, 6),   # Ox-Horse
    (2, 5),   # Tiger-Snake
    (3, 4),   # Rabbit-Dragon
    (8, 11),  # Monkey-Pig
    (9, 10),  # Rooster-Dog
]

# Breaks (相破), symmetric
BREAKS = [
    (0, 9),   # Rat-Rooster
    (1, 4),   # Ox-Dragon
    (2, 11),  # Tiger-Pig
    (3, 6),   # Rabbit-Horse
    (5, 8),   # Snake-Monkey
    (7, 10),  # Goat-Dog
]


def _symmetric(pairs):
    table = {}
    for a, b in pairs:
        table[a] = b
        table[b] = a
    return table


HARM_PARTNER = _symmetric(SIX_HARMS)
BREAK_PARTNER = _symmetric(BREAKS)

# Punishments (刑), directed: year sign -> punished sign.
# Rude punishment Rat<->Rabbit is mutual; the two triangles run one way.
# Dragon, Horse, Rooster and Pig only punish themselves and are absent.
PUNISH_TARGET = {
    0: 3, 3: 0,             # Rat <-> Rabbit
    1: 10, 10: 7, 7: 1,     # Ox -> Dog -> Goat -> Ox
    2: 5, 5: 8, 8: 2,       # Tiger -> Snake -> Monkey -> Tiger
}

SELF_PUNISHING = [4, 6, 9, 11]


def clash_of(index: int) -> int:
    return (index + 6) % 12


def harm_of(index: int) -> int:
    return HARM_PARTNER[index]


def punish_of(index: int) -> Optional[int]:
    """Punished sign index, or None for the self-punishing signs."""
    return PUNISH_TARGET.get(index)


def break_of(index: int) -> int:
    return BREAK_PARTNER[index]


# ============================================================
# TAI SUI
# ============================================================

@dataclass(frozen=True)
class Conflict:
    sign: ZodiacSign
    kind: ConflictKind

    @property
    def description(self) -> str:
        return self.kind.description

    @property
    def remedy(self) -> str:
        return self.kind.remedy

    def to_dict(self):
        return {
            "sign": self.sign.chinese,
            "animal": self.sign.animal,
            "type": self.kind.value,
            "kind": self.kind.name.lower(),
            "description": self.description,
            "remedy": self.remedy,
        }


@dataclass
class TaiSuiResult:
    year: int
    year_sign: ZodiacSign
    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def signs_in_conflict(self) -> list[ZodiacSign]:
        return [c.sign for c in self.conflicts]

    def conflict_for(self, sign: Union[ZodiacSign, str]) -> Optional[Conflict]:
        """The conflict a sign is listed under this year, if any."""
        target = zodiac_sign(sign)
        for conflict in self.conflicts:
            if conflict.sign == target:
                return conflict
        return None

    def to_dict(self):
        return {
            "year": self.year,
            "year_sign": self.year_sign.chinese,
            "year_animal": self.year_sign.animal,
            "conflicts": [c.to_dict() for c in self.conflicts],
        }


def tai_sui(year: int) -> TaiSuiResult:
    """
    Compute the year's zodiac sign and the signs that offend Tai Sui.

    Candidates are evaluated in the order Value, Clash, Harm, Punish,
    Break. A sign already listed under an earlier kind is not listed
    again, so Punish or Break may drop out for some years.

    Args:
        year: Gregorian year (the Li Chun year, see astro_calendar)

    Returns:
        TaiSuiResult with year_sign and the ordered conflict list
    """
    idx = zodiac_index(year)
    candidates = [
        (ConflictKind.VALUE, idx),
        (ConflictKind.CLASH, clash_of(idx)),
        (ConflictKind.HARM, harm_of(idx)),
        (ConflictKind.PUNISH, punish_of(idx)),
        (ConflictKind.BREAK, break_of(idx)),
    ]

    result = TaiSuiResult(year=year, year_sign=ZODIACS[idx])
    seen = set()
    for kind, sign_index in candidates:
        if sign_index is None or sign_index in seen:
            continue
        seen.add(sign_index)
        result.conflicts.append(Conflict(sign=ZODIACS[sign_index], kind=kind))
    return result


# ============================================================
# BIRTH YEARS
# ============================================================

BIRTH_YEAR_SPAN = 90


def affected_birth_years(sign: Union[ZodiacSign, str], reference_year: int,
                         span: int = BIRTH_YEAR_SPAN) -> list[int]:
    """
    Birth years of a sign, looking back from the reference year.

    Starts at the latest year of the sign not after reference_year
    (at most 11 years back) and steps back 12 years at a time while
    staying within reference_year - span.

    Returns:
        Ascending list of years, never empty
    """
    target = zodiac_sign(sign).index

    latest = reference_year
    while zodiac_index(latest) != target:
        latest -= 1

    years = []
    y = latest
    while y >= reference_year - span:
        years.append(y)
        y -= 12
    if not years:
        # span shorter than the gap back to the latest year
        years.append(latest)
    return sorted(years)
