from bs4 import BeautifulSoup

from universal.utils import parse_number_default


class RawItemEntry():
    """One item as decoded from a class document, before normalization.

    `attributes` maps attribute name to the raw string carried by the
    attribute node's value; an attribute that is not in the mapping is absent.
    """

    def __init__(self, name, item_class, image="", value=None, attributes=None,
                 susceptibilities=None, unattainable=False):
        self.name = name
        self.item_class = item_class
        self.image = image
        self.value = value
        self.attributes = attributes or {}
        self.susceptibilities = susceptibilities or []
        self.unattainable = unattainable

    def __repr__(self):
        return "<RawItemEntry %s (%s) %s>" % (
            self.name, self.item_class, self.attributes)


def number_attribute(bag, name, default=0):
    if name not in bag:
        return default
    return parse_number_default(bag[name], default)


def string_attribute(bag, name):
    return bag.get(name)


def parse_item_entries(content, class_name):
    """Decodes a per-class items document into RawItemEntry objects."""
    if not content or not content.strip():
        return []
    soup = BeautifulSoup(content, "xml")
    entries = []
    for item in soup.find_all("item"):
        name = item.get("name")
        if name is None:
            continue
        entries.append(parse_item_entry(item, name, class_name))
    return entries


def parse_item_entry(item, name, class_name):
    def _type_info():
        type_info = item.find("type")
        if type_info is None:
            return class_name, ""
        return type_info.get("class", class_name), type_info.get("subclass", "")

    def _value():
        value = item.find("value", recursive=False)
        if value is None:
            return None
        return value.get("value")

    def _attributes():
        bag = {}
        attributes = item.find("attributes")
        if attributes is None:
            return bag
        for child in attributes.find_all(True, recursive=False):
            # first occurrence wins
            if child.name in bag or not child.has_attr("value"):
                continue
            bag[child.name] = child["value"]
        return bag

    def _susceptibilities():
        pairs = []
        for node in item.find_all("susceptibility"):
            if not node.has_attr("type"):
                continue
            pairs.append((node["type"], node.get("value")))
        return pairs

    item_class, image = _type_info()
    return RawItemEntry(
        name, item_class, image,
        value=_value(),
        attributes=_attributes(),
        susceptibilities=_susceptibilities(),
        unattainable=item.find("unattainable") is not None)
