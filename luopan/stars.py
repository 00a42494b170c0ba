"""
Flying star catalog.

Handles:
- The five elements and their Chinese labels
- The nine stars (九星): name, element, auspiciousness
- Per-star placement recommendations and taboos

Reference data only. The engine in flying_stars.py decides WHERE a star
lands; this module says WHAT the star is.
"""

from dataclasses import dataclass
from enum import Enum


# ============================================================
# FUNDAMENTAL DATA STRUCTURES
# ============================================================

class Element(Enum):
    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"
    METAL = "metal"
    WATER = "water"

    @property
    def chinese(self) -> str:
        return ELEMENT_CHINESE[self]


ELEMENT_CHINESE = {
    Element.WOOD: "木",
    Element.FIRE: "火",
    Element.EARTH: "土",
    Element.METAL: "金",
    Element.WATER: "水",
}


@dataclass(frozen=True)
class Recommendation:
    item: str
    kind: str  # "plant" or "decor"
    reason: str


@dataclass(frozen=True)
class Star:
    number: int
    name: str
    element: Element
    auspicious: bool
    description: str
    recommendations: tuple[Recommendation, ...]
    taboos: tuple[str, ...]

    def __str__(self):
        return f"{self.number} {self.name} ({self.element.value}, {'吉' if self.auspicious else '凶'})"

    def to_dict(self):
        return {
            "number": self.number,
            "name": self.name,
            "element": self.element.value,
            "element_chinese": self.element.chinese,
            "auspicious": self.auspicious,
            "nature": "吉" if self.auspicious else "凶",
            "description": self.description,
            "recommendations": [
                {"item": r.item, "kind": r.kind, "reason": r.reason}
                for r in self.recommendations
            ],
            "taboos": list(self.taboos),
        }


# ============================================================
# THE NINE STARS
# ============================================================

def _star(number, name, element, auspicious, description, recommendations, taboos):
    return Star(
        number=number,
        name=name,
        element=element,
        auspicious=auspicious,
        description=description,
        recommendations=tuple(Recommendation(*r) for r in recommendations),
        taboos=tuple(taboos),
    )


STARS = {
    1: _star(1, "一白貪狼星", Element.WATER, True,
             "主官運、文昌、人緣與桃花，利於學業與事業發展。",
             [("金屬工藝品", "decor", "金生水，增強吉星力量"),
              ("流水擺飾", "decor", "流動之水催旺財運")],
             ["避免堆放雜物", "不宜紅色過多（火水相沖）"]),
    2: _star(2, "二黑巨門星", Element.EARTH, False,
             "病符星，主疾病傷痛，需注意健康問題，尤其是腹部與消化系統。",
             [("銅葫蘆", "decor", "化解病氣，金洩土氣"),
              ("六帝錢", "decor", "鎮宅化煞")],
             ["紅色地毯", "點長明燈", "放置盆栽（木剋土激怒病符）"]),
    3: _star(3, "三碧祿存星", Element.WOOD, False,
             "是非星，主口舌爭端、官非訴訟，易引起情緒波動。",
             [("紅色中國結", "decor", "火洩木氣，化解是非"),
              ("紫水晶", "decor", "平和心境，屬火象徵")],
             ["綠色植物", "藍色物品", "魚缸"]),
    4: _star(4, "四綠文曲星", Element.WOOD, True,
             "文昌星，主學業、考試、進修及文職工作，亦利桃花。",
             [("富貴竹 (4支)", "plant", "步步高升，催旺文昌"),
              ("文昌塔", "decor", "集中精神，提升考運")],
             ["金屬銳器", "雜亂無章"]),
    5: _star(5, "五黃廉貞星", Element.EARTH, False,
             "大煞星，主災禍、意外、重病，是九星中最凶的一顆。",
             [("銅鐘/銅鈴", "decor", "金屬聲音化解土煞"),
              ("安忍水", "decor", "強力化煞")],
             ["動土", "紅色物品", "興工裝修"]),
    6: _star(6, "六白武曲星", Element.METAL, True,
             "偏財星，主橫財、貴人、權力，利於武職及管理階層。",
             [("黃水晶", "decor", "土生金，聚財"),
              ("聚寶盆", "decor", "招財納福")],
             ["紅色物品", "爐灶"]),
    7: _star(7, "七赤破軍星", Element.METAL, False,
             "破財星，主盜賊、火災、損丁，亦代表口舌是非。",
             [("黑曜石", "decor", "水洩金氣，化煞"),
              ("藍色地毯", "decor", "五行屬水，安撫肅殺之氣")],
             ["金屬尖銳物", "樂器"]),
    8: _star(8, "八白左輔星", Element.EARTH, True,
             "當運財星（九運中為退氣，但仍吉），主正財、置業、升職。",
             [("紅燈籠/紅地毯", "decor", "火生土，催旺財氣"),
              ("紫晶洞", "decor", "聚氣生財")],
             ["綠色植物（木剋土）", "垃圾桶"]),
    9: _star(9, "九紫右弼星", Element.FIRE, True,
             "喜慶星（九運當令），主喜事、姻緣、人緣，大吉之星。",
             [("紅色鮮花", "plant", "木火通明，喜上加喜"),
              ("常綠植物", "plant", "生旺火氣")],
             ["黑色物品", "水景（水剋火）"]),
}


def star_info(number: int) -> Star:
    """Look up a star by number (1-9)."""
    try:
        return STARS[number]
    except KeyError:
        raise ValueError(f"Star number must be 1-9, got {number!r}") from None
