import sys

from stendhal.attributes import number_attribute, parse_item_entries
from stendhal.classes import ITEMS_CONFIG, available_classes
from stendhal.classes import classes_for_selection, parse_classes, select_class
from stendhal.remote import fetch_documents
from stendhal.special import special_traits
from stendhal.table import sort_records, visible_columns
from stendhal.version import PROPERTIES, parse_version, version_string
from universal.utils import parse_number_default, round_half_up

# each half names its complement
DUAL_WIELD = {
    "l hand sword": "r hand sword",
    "r hand sword": "l hand sword",
}
DUAL_WIELD_NAME = "l/r hand swords"


class ItemContext():
    """State for one population run.

    Records are kept in insertion order. `pending` maps the name of a
    recorded dual-wield half to its record and the entry it was built from,
    until the complementary half arrives.
    """

    def __init__(self, active_class, include_unattainable=False):
        self.active_class = active_class
        self.include_unattainable = include_unattainable
        self.records = []
        self.pending = {}


def compute_dpt(atk, rate):
    if rate == 0:
        return 0
    return round_half_up(atk / rate * 100) / 100


def build_record(entry, context, atk=None, defense=None):
    bag = entry.attributes
    if atk is None:
        atk = number_attribute(bag, "atk")
    if defense is None:
        defense = number_attribute(bag, "def")
    record = {
        "name": entry.name,
        "class": entry.item_class,
        "image": entry.image,
        "value": parse_number_default(entry.value, 0),
        "level": number_attribute(bag, "min_level"),
        "rate": number_attribute(bag, "rate"),
        "atk": atk,
        "def": defense,
        "range": number_attribute(bag, "range"),
    }
    record["dpt"] = compute_dpt(record["atk"], record["rate"])
    record["special"] = special_traits(
        entry, context.active_class, atk=atk, defense=defense,
        range_=record["range"])
    return record


def merge_pass(entry, context):
    """Collapses a dual-wield pair into one record.

    Returns the merged record when the complementary half was already
    recorded, otherwise None.
    """
    complement = DUAL_WIELD.get(entry.name)
    if complement is None or complement not in context.pending:
        return None
    half, half_entry = context.pending.pop(complement)
    context.records.remove(half)
    atk = half["atk"] + number_attribute(entry.attributes, "atk")
    defense = half["def"] + number_attribute(entry.attributes, "def")
    record = build_record(half_entry, context, atk=atk, defense=defense)
    record["name"] = DUAL_WIELD_NAME
    return record


def unattainable_pass(entry, context):
    if not entry.unattainable:
        return True
    sys.stderr.write("INFO: unattainable item: %s (%s)\n" % (
        entry.name, entry.item_class))
    return context.include_unattainable


def add_entry(entry, context):
    if not unattainable_pass(entry, context):
        return None
    record = merge_pass(entry, context)
    if record is None:
        record = build_record(entry, context)
        if entry.name in DUAL_WIELD:
            context.pending[entry.name] = (record, entry)
    context.records.append(record)
    return record


def build_records(documents, active_class, include_unattainable=False):
    """Turns fetched (class, content) documents into item records.

    Documents are processed strictly in the order given; a document whose
    content is None contributes nothing.
    """
    context = ItemContext(active_class, include_unattainable)
    for class_name, content in documents:
        if content is None:
            continue
        for entry in parse_item_entries(content, class_name):
            add_entry(entry, context)
    return context.records


def populate(source, requested_class=None, sort_by="name", descending=False,
             include_unattainable=False, workers=4):
    version = parse_version(source.fetch_text(PROPERTIES))
    class_names = parse_classes(source.fetch_text(ITEMS_CONFIG))
    available = available_classes(class_names)
    selected = select_class(requested_class, available)
    documents = fetch_documents(
        source, classes_for_selection(selected, available), workers)
    records = build_records(documents, selected, include_unattainable)
    struct = {
        "title": " ".join(filter(None, [
            "Stendhal", version_string(version), selected.capitalize()])),
        "version": list(version) if version is not None else None,
        "class": selected,
        "classes": available,
        "columns": visible_columns(selected),
        "items": sort_records(records, sort_by, descending),
    }
    return struct
