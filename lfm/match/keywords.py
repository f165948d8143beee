"""Immutable keyword tables used by the classifiers and bonus checks.

Tables are ordered tuples: lookups walk them front to back and the first hit
wins, so declaration order is the tie-break. Components receive a table at
construction time, which lets tests swap in alternate keyword sets.
"""

from __future__ import annotations
from typing import Tuple

from ..models import ItemCategory

KeywordGroup = Tuple[str, Tuple[str, ...]]

CATEGORY_KEYWORDS: Tuple[Tuple[ItemCategory, Tuple[str, ...]], ...] = (
    (ItemCategory.WALLET, ("กระเป๋าสตางค์", "wallet", "เงิน", "บัตร", "กระเป๋าตัง", "สตางค์", "ตังค์")),
    (ItemCategory.PHONE, (
        "โทรศัพท์", "มือถือ", "phone", "iphone", "samsung", "android", "oppo", "vivo",
        "xiaomi", "realme", "huawei", "โทรศัพ",
    )),
    (ItemCategory.KEYS, ("กุญแจ", "key", "พวงกุญแจ", "ลูกกุญแจ", "รีโมท", "remote", "กุญแจรถ", "กุญแจบ้าน")),
    (ItemCategory.BAG, ("กระเป๋า", "bag", "เป้", "backpack", "กระเป๋าเป้", "กระเป๋าสะพาย", "ถุง", "pouch")),
    (ItemCategory.ELECTRONICS, (
        "ไอแพด", "ipad", "laptop", "แท็บเล็ต", "tablet", "หูฟัง", "airpods", "earbuds",
        "powerbank", "แบตสำรอง", "charger", "สายชาร์จ", "เมาส์", "mouse", "คีย์บอร์ด",
        "keyboard", "flash drive", "usb", "หม้อ", "พัดลม", "กล้อง", "camera",
    )),
    (ItemCategory.DOCUMENTS, (
        "เอกสาร", "บัตร", "card", "สมุด", "หนังสือ", "ใบ", "บัตรนักเรียน", "บัตรประชาชน",
        "id card", "passport", "ใบขับขี่",
    )),
    (ItemCategory.CLOTHING, (
        "เสื้อ", "กางเกง", "หมวก", "รองเท้า", "jacket", "แจ็คเก็ต", "เสื้อกันหนาว",
        "ผ้าพันคอ", "ถุงเท้า", "เข็มขัด", "ร่ม", "umbrella",
    )),
    (ItemCategory.ACCESSORIES, (
        "แหวน", "สร้อย", "ต่างหู", "นาฬิกา", "แว่น", "watch", "glasses", "สร้อยคอ",
        "กำไล", "เครื่องประดับ", "jewelry", "แว่นตา", "smartwatch", "apple watch",
    )),
    (ItemCategory.OTHER, ()),
)

LOCATION_KEYWORDS: Tuple[KeywordGroup, ...] = (
    ("canteen", ("โรงอาหาร", "canteen", "ทานข้าว", "อาหาร", "โต๊ะอาหาร", "ศูนย์อาหาร")),
    ("sports_field", (
        "สนามกีฬา", "โกล", "สนามบอล", "สนามฟุตบอล", "กีฬา", "court", "สนาม", "ฟุตซอล", "บาส", "วอลเล่ย์",
    )),
    ("restroom", ("ห้องน้ำ", "toilet", "ส้วม", "bathroom", "restroom")),
    ("library", ("ห้องสมุด", "library", "ศูนย์เรียนรู้")),
    ("building", ("ตึก", "อาคาร", "building", "ชั้น", "floor")),
    ("classroom", ("ห้องเรียน", "ห้อง", "classroom", "class")),
    ("shop", ("สหกรณ์", "ร้าน", "shop", "ร้านค้า", "เซเว่น", "7-11")),
    ("office", ("ธุรการ", "admin", "office", "สำนักงาน")),
    ("discipline_office", ("ปกครอง", "discipline", "กิจการ")),
    ("dormitory", ("หอพัก", "หอ", "dorm", "dormitory", "ที่พัก")),
    ("parking", ("ลานจอดรถ", "จอดรถ", "parking", "ที่จอด")),
    ("lobby", ("โถง", "lobby", "ทางเดิน", "บันได", "ลิฟต์")),
)

BRAND_KEYWORDS: Tuple[str, ...] = (
    "iphone", "samsung", "oppo", "vivo", "casio", "seiko", "nike", "adidas", "converse", "apple", "xiaomi",
)

COLOR_KEYWORDS: Tuple[str, ...] = (
    "ดำ", "ขาว", "แดง", "น้ำเงิน", "เขียว", "เหลือง", "ชมพู", "ม่วง", "ส้ม", "น้ำตาล", "เทา", "ทอง", "เงิน",
)


def first_shared_keyword(keywords: Tuple[str, ...], left: str, right: str) -> str | None:
    """Return the first keyword present in both (already normalized) texts."""
    for keyword in keywords:
        kw = keyword.lower()
        if kw in left and kw in right:
            return keyword
    return None


__all__ = [
    "KeywordGroup",
    "CATEGORY_KEYWORDS",
    "LOCATION_KEYWORDS",
    "BRAND_KEYWORDS",
    "COLOR_KEYWORDS",
    "first_shared_keyword",
]
