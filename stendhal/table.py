from stendhal.classification import (
    is_armor_type,
    is_projectile_type,
    is_ranged_type,
    is_weapon_type,
)
from stendhal.remote import REPO_PREFIX
from universal.utils import format_number

FIELDS = [
    "name", "class", "image", "value", "level", "rate", "atk", "def",
    "range", "dpt", "special"]
ITEM_URL = "https://stendhalgame.org/item/%s/%s.html"


def sort_records(records, sort_by="name", descending=False):
    if sort_by not in FIELDS:
        sort_by = "name"
    return sorted(records, key=lambda r: r[sort_by], reverse=descending)


def visible_columns(active_class):
    columns = ["name", "class", "image", "value", "level"]
    attacks = is_weapon_type(active_class) or is_projectile_type(active_class)
    if attacks:
        columns.extend(["rate", "atk"])
    if is_armor_type(active_class):
        columns.append("def")
    if is_ranged_type(active_class) or is_projectile_type(active_class):
        columns.append("range")
    if attacks:
        columns.append("dpt")
    columns.append("special")
    return columns


def item_url(record):
    return ITEM_URL % (record["class"], record["name"].replace(" ", "_"))


def image_url(record, branch="master"):
    return "%s%s/data/sprites/items/%s/%s.png" % (
        REPO_PREFIX, branch, record["class"], record["image"])


def display_row(record, columns):
    row = []
    for column in columns:
        value = record[column]
        if isinstance(value, list):
            row.append(", ".join(value))
        elif isinstance(value, float):
            row.append(format_number(value))
        else:
            row.append(str(value))
    return row
